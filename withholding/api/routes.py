"""API routes for the withholding tax calculator."""

import logging
from decimal import Decimal
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from config.settings import settings
from withholding.api.form_fields import FormSpec, load_form
from withholding.api.models import BracketInfo, CalculateResponse
from withholding.calculators.monthly_tax import TaxInputs, calculate_monthly_tax
from withholding.calculators.tax_data import TAX_BRACKETS

logger = logging.getLogger(__name__)

router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "static"


class CalculateRequest(BaseModel):
    """Request body for the /calculate endpoint."""

    total_income: Decimal = Field(ge=0, description="Cumulative income to date")
    total_tax_paid: Decimal = Field(ge=0, description="Cumulative tax withheld to date")
    current_month: int = Field(ge=1, le=12, description="Current month (1-12)")
    current_month_income: Decimal = Field(ge=0, description="Next month's income")
    threshold: Decimal = Field(
        default_factory=lambda: settings.default_monthly_threshold,
        ge=0,
        description="Monthly threshold",
    )
    insurance: Decimal = Field(
        default=Decimal("0"), ge=0, description="Monthly social insurance and housing fund"
    )
    special_deduction: Decimal = Field(
        default=Decimal("0"), ge=0, description="Monthly special additional deductions"
    )

    def to_inputs(self) -> TaxInputs:
        return TaxInputs(
            total_income=self.total_income,
            total_tax_paid=self.total_tax_paid,
            current_month=self.current_month,
            current_month_income=self.current_month_income,
            threshold=self.threshold,
            insurance=self.insurance,
            special_deduction=self.special_deduction,
        )


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the frontend."""
    return FileResponse(STATIC_DIR / "index.html")


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/brackets", response_model=list[BracketInfo])
async def brackets() -> list[BracketInfo]:
    """List the withholding bracket schedule."""
    return [BracketInfo.from_bracket(b) for b in TAX_BRACKETS]


@router.get("/form", response_model=FormSpec)
async def form() -> FormSpec:
    """Form field definitions with today's defaults."""
    return load_form()


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(body: CalculateRequest) -> CalculateResponse:
    """Calculate next month's withholding tax."""
    result = calculate_monthly_tax(body.to_inputs())
    logger.info(
        "Calculated month=%d level=%d tax=%s",
        body.current_month, result.tax_rate.level, result.current_month_tax,
    )
    return CalculateResponse.from_result(result, body.current_month)
