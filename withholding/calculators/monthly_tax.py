"""Next-month withholding under the cumulative (year-to-date) method."""

import logging
import math
from decimal import Decimal, InvalidOperation, localcontext
from typing import NamedTuple

from withholding.calculators.brackets import calculate_cumulative_tax, lookup_bracket
from withholding.calculators.tax_data import (
    DEFAULT_MONTHLY_THRESHOLD,
    MONTHS_PER_YEAR,
    TaxBracket,
)
from withholding.calculators.taxable_income import (
    Amount,
    clamp_at_zero,
    resolve_taxable_income,
    to_decimal,
)

logger = logging.getLogger(__name__)


class TaxInputs(NamedTuple):
    """Year-to-date figures plus next month's projection and monthly deductions."""

    total_income: Amount
    total_tax_paid: Amount
    current_month: int | float
    current_month_income: Amount
    threshold: Amount = DEFAULT_MONTHLY_THRESHOLD
    insurance: Amount = 0
    special_deduction: Amount = 0


class CalculationResult(NamedTuple):
    """Outcome of a single next-month calculation."""

    current_month_tax: Decimal
    new_total_income: Decimal
    total_tax_due: Decimal
    tax_rate: TaxBracket


def clamp_month(month: int | float) -> int | float:
    """Clamp into 1..12. Fractions are kept; NaN is treated as month 1."""
    if math.isnan(month):
        return 1
    return max(1, min(MONTHS_PER_YEAR, month))


def next_month_of(month: int | float) -> int | float:
    """Month following ``month``; anything that would pass 12 wraps to 1."""
    following = month + 1
    return following if following <= MONTHS_PER_YEAR else 1


def calculate_monthly_tax(inputs: TaxInputs) -> CalculationResult:
    """Calculate next month's withholding from year-to-date figures.

    Deductions are monthly amounts and get multiplied by the number of the
    projected month. When ``current_month`` is 12 the projected month wraps to
    1, so the multiplier resets to 1 rather than continuing to 13. A
    fractional month is not rounded: month 2.5 uses a multiplier of 3.5.

    Out-of-range months are clamped and nothing is raised; validating the
    figures is left to the caller. NaN amounts propagate into the result.

    Args:
        inputs: Year-to-date income and tax paid, the current month (1-12),
            next month's income and the monthly threshold/deductions.

    Returns:
        CalculationResult with next month's tax, the new cumulative income,
        the cumulative tax due and the applicable bracket.
    """
    month = clamp_month(inputs.current_month)
    next_month = next_month_of(month)
    multiplier = to_decimal(next_month)

    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        new_total_income = to_decimal(inputs.total_income) + to_decimal(inputs.current_month_income)
        taxable_income = resolve_taxable_income(
            new_total_income,
            to_decimal(inputs.threshold) * multiplier,
            to_decimal(inputs.insurance) * multiplier,
            to_decimal(inputs.special_deduction) * multiplier,
        )
        total_tax_due = calculate_cumulative_tax(taxable_income)
        current_month_tax = clamp_at_zero(total_tax_due - to_decimal(inputs.total_tax_paid))
    tax_rate = lookup_bracket(taxable_income)

    logger.debug(
        "month=%s next=%s taxable=%s level=%d due=%s",
        month, next_month, taxable_income, tax_rate.level, total_tax_due,
    )

    return CalculationResult(
        current_month_tax=current_month_tax,
        new_total_income=new_total_income,
        total_tax_due=total_tax_due,
        tax_rate=tax_rate,
    )
