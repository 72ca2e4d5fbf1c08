"""Taxable income resolver."""

from decimal import Decimal, InvalidOperation, localcontext

from withholding.calculators.tax_data import DEFAULT_MONTHLY_THRESHOLD

Amount = Decimal | int | float | str


def to_decimal(value: Amount) -> Decimal:
    """Coerce a numeric value to Decimal, going through str() for floats.

    Signalling NaNs become quiet NaNs so later arithmetic does not raise.
    """
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if amount.is_snan():
        return Decimal("NaN")
    return amount


def clamp_at_zero(value: Decimal) -> Decimal:
    """max(0, value); NaN passes through unchanged."""
    if value.is_nan():
        return value
    return max(Decimal("0"), value)


def resolve_taxable_income(
    gross_income: Amount,
    threshold: Amount = DEFAULT_MONTHLY_THRESHOLD,
    insurance: Amount = 0,
    special_deduction: Amount = 0,
) -> Decimal:
    """Subtract the threshold and deductions from gross income, floored at zero.

    Inputs are not validated; only the result is clamped. NaN inputs (or
    infinities that cancel out) give NaN rather than an exception.

    Args:
        gross_income: Gross (cumulative) income.
        threshold: Basic deduction already scaled to the period covered.
        insurance: Social insurance and housing fund deductions.
        special_deduction: Special additional deductions.

    Returns:
        Taxable income, never negative.
    """
    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        taxable = (
            to_decimal(gross_income)
            - to_decimal(threshold)
            - to_decimal(insurance)
            - to_decimal(special_deduction)
        )
    return clamp_at_zero(taxable)
