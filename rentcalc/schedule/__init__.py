# Re-export schedule components
from rentcalc.conventions.types import Frequency

from .core import BillingPeriod, Period
from .periods import billing_period, billing_schedule, schedule_frame
from .quarters import QuarterPeriod, quarters_for_year, resolve_quarter
