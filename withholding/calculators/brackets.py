"""Bracket lookup and cumulative tax via the quick deduction formula."""

from decimal import Decimal

from withholding.calculators.tax_data import TAX_BRACKETS, TaxBracket
from withholding.calculators.taxable_income import Amount, to_decimal


def lookup_bracket(taxable_income: Amount) -> TaxBracket:
    """Return the highest bracket whose threshold is strictly below the income.

    Income exactly on a threshold stays in the lower bracket. Zero, NaN, or
    anything else not above any threshold falls back to level 1.
    """
    income = to_decimal(taxable_income)
    if income.is_nan():
        return TAX_BRACKETS[0]
    for bracket in reversed(TAX_BRACKETS):
        if income > bracket.threshold:
            return bracket
    return TAX_BRACKETS[0]


def calculate_cumulative_tax(taxable_income: Amount) -> Decimal:
    """Cumulative tax due: taxable income * rate - quick deduction."""
    income = to_decimal(taxable_income)
    bracket = lookup_bracket(income)
    return income * bracket.rate - bracket.quick_deduction
