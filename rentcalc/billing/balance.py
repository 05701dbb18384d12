"""Balance due on an invoice."""

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from rentcalc.errors import ValidationError
from rentcalc.utils.money import MoneyLike, to_decimal

from .amounts import DECIMAL_PRECISION
from .terms import MonetaryState


def compute_balance_due(total_amount: MoneyLike, state: MonetaryState) -> Decimal:
    """
    previous_balance + total_amount - payment_made - credit_note_amount.

    Not clamped at zero: a negative balance is credit owed to the tenant.
    """
    total = to_decimal(total_amount, "total_amount")
    if state is None:
        raise ValidationError("state")
    if not isinstance(state, MonetaryState):
        raise ValidationError("state", f"expected MonetaryState, got {type(state).__name__}")

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        ctx.rounding = ROUND_HALF_EVEN
        return state.previous_balance + total - state.payment_made - state.credit_note_amount
