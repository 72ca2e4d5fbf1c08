"""IIT constants: cumulative withholding bracket schedule for resident wages.

Hardcoded Python constants (not DB-driven). One fixed schedule; thresholds are
cumulative annual taxable income in CNY.
"""

from decimal import Decimal
from typing import NamedTuple


class TaxBracket(NamedTuple):
    """A single cumulative withholding bracket."""

    threshold: Decimal  # exclusive: applies to income strictly above this
    rate: Decimal
    quick_deduction: Decimal
    level: int


TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("0"), Decimal("0.03"), Decimal("0"), 1),
    TaxBracket(Decimal("36000"), Decimal("0.10"), Decimal("2520"), 2),
    TaxBracket(Decimal("144000"), Decimal("0.20"), Decimal("16920"), 3),
    TaxBracket(Decimal("300000"), Decimal("0.25"), Decimal("31920"), 4),
    TaxBracket(Decimal("420000"), Decimal("0.30"), Decimal("52920"), 5),
    TaxBracket(Decimal("660000"), Decimal("0.35"), Decimal("85920"), 6),
    TaxBracket(Decimal("960000"), Decimal("0.45"), Decimal("181920"), 7),
)

# Basic monthly deduction (起征点)
DEFAULT_MONTHLY_THRESHOLD = Decimal("5000")

MONTHS_PER_YEAR = 12
