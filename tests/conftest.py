"""
Ensure project root is on sys.path so `import rentcalc` works during tests.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent  # tests/.. → project root
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
