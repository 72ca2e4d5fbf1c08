"""Display formatting for calculation results (CNY, zh-CN style)."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from withholding.calculators.tax_data import TAX_BRACKETS, TaxBracket
from withholding.calculators.taxable_income import Amount, to_decimal

CURRENCY_SYMBOL = "¥"

_CENT = Decimal("0.01")
_WHOLE = Decimal("1")


def _round_half_up(value: Decimal, exponent: Decimal) -> Decimal:
    """Quantize with enough precision for any magnitude."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exponent.as_tuple().exponent + 2)
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def format_currency(amount: Amount) -> str:
    """Format an amount as ``¥1,234.56``; negatives as ``-¥1,234.56``.

    NaN and infinities render as ``¥NaN`` / ``¥∞`` / ``-¥∞``.
    """
    value = to_decimal(amount)
    if value.is_nan():
        return f"{CURRENCY_SYMBOL}NaN"
    sign = "-" if value.is_signed() and value != 0 else ""
    if value.is_infinite():
        return f"{sign}{CURRENCY_SYMBOL}∞"
    value = _round_half_up(value, _CENT)
    if value == 0:
        sign = ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"


def format_percent(rate: Amount) -> str:
    """Format a rate as a whole percentage, e.g. 0.45 -> ``45%``."""
    value = to_decimal(rate)
    if value.is_nan():
        return "NaN%"
    if value.is_infinite():
        return f"{'-' if value.is_signed() else ''}∞%"
    percent = _round_half_up(value.scaleb(2), _WHOLE)
    return f"{percent}%"


def projected_month_label(current_month: int) -> str:
    """Label for the month the tax is projected for.

    Shows ``current_month + 1`` as-is, so December reads as month 13.
    """
    return f"第{current_month + 1}月预计缴纳"


def bracket_label(bracket: TaxBracket) -> str:
    """Describe a bracket, e.g. ``第3级: 20% (超过¥144,000.00/年)``.

    The top bracket has no threshold note.
    """
    label = f"第{bracket.level}级: {format_percent(bracket.rate)}"
    if bracket.level < len(TAX_BRACKETS):
        label += f" (超过{format_currency(bracket.threshold)}/年)"
    return label
