"""Pydantic response models for the calculator API."""

from pydantic import BaseModel

from withholding.calculators.display import (
    bracket_label,
    format_currency,
    format_percent,
    projected_month_label,
)
from withholding.calculators.monthly_tax import CalculationResult, clamp_month
from withholding.calculators.tax_data import TaxBracket


class BracketInfo(BaseModel):
    """A bracket as exposed over the API."""

    level: int
    threshold: float
    rate: float
    quick_deduction: float
    label: str

    @classmethod
    def from_bracket(cls, bracket: TaxBracket) -> "BracketInfo":
        return cls(
            level=bracket.level,
            threshold=float(bracket.threshold),
            rate=float(bracket.rate),
            quick_deduction=float(bracket.quick_deduction),
            label=bracket_label(bracket),
        )


class FormattedResult(BaseModel):
    """Display strings for the result card."""

    current_month_tax: str
    new_total_income: str
    total_tax_due: str
    tax_rate: str
    projected_month: str


class CalculateResponse(BaseModel):
    """Response from the /calculate endpoint."""

    current_month_tax: float
    new_total_income: float
    total_tax_due: float
    tax_rate: BracketInfo
    formatted: FormattedResult

    @classmethod
    def from_result(cls, result: CalculationResult, current_month: int) -> "CalculateResponse":
        return cls(
            current_month_tax=float(result.current_month_tax),
            new_total_income=float(result.new_total_income),
            total_tax_due=float(result.total_tax_due),
            tax_rate=BracketInfo.from_bracket(result.tax_rate),
            formatted=FormattedResult(
                current_month_tax=format_currency(result.current_month_tax),
                new_total_income=format_currency(result.new_total_income),
                total_tax_due=format_currency(result.total_tax_due),
                tax_rate=format_percent(result.tax_rate.rate),
                projected_month=projected_month_label(clamp_month(current_month)),
            ),
        )
