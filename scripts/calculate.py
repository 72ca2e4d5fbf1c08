"""CLI script for a one-off withholding calculation.

Usage:
    # February figures, projecting March
    python scripts/calculate.py --total-income 30000 --total-tax-paid 900 \
        --month 2 --next-income 20000

    # With monthly deductions, JSON output
    python scripts/calculate.py --total-income 30000 --total-tax-paid 900 \
        --month 2 --next-income 20000 --insurance 2000 --special-deduction 1500 --json

    # Verbose logging
    python scripts/calculate.py ... -v
"""

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from withholding.api.models import CalculateResponse
from withholding.calculators.monthly_tax import TaxInputs, calculate_monthly_tax

logger = logging.getLogger(__name__)


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value}") from None
    if not amount.is_finite() or amount < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative amount: {value}")
    return amount


def _month(value: str) -> int:
    try:
        month = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole month: {value}") from None
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"month must be between 1 and 12: {value}")
    return month


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate next month's withholding income tax")
    parser.add_argument("--total-income", type=_amount, required=True, help="Cumulative income to date")
    parser.add_argument("--total-tax-paid", type=_amount, required=True, help="Cumulative tax withheld to date")
    parser.add_argument("--month", type=_month, required=True, help="Current month (1-12)")
    parser.add_argument("--next-income", type=_amount, required=True, help="Next month's income")
    parser.add_argument(
        "--threshold",
        type=_amount,
        default=settings.default_monthly_threshold,
        help=f"Monthly threshold (default: {settings.default_monthly_threshold})",
    )
    parser.add_argument("--insurance", type=_amount, default=Decimal("0"), help="Monthly social insurance and housing fund")
    parser.add_argument(
        "--special-deduction", type=_amount, default=Decimal("0"), help="Monthly special additional deductions"
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    inputs = TaxInputs(
        total_income=args.total_income,
        total_tax_paid=args.total_tax_paid,
        current_month=args.month,
        current_month_income=args.next_income,
        threshold=args.threshold,
        insurance=args.insurance,
        special_deduction=args.special_deduction,
    )
    response = CalculateResponse.from_result(calculate_monthly_tax(inputs), args.month)

    if args.json:
        print(json.dumps(response.model_dump(), ensure_ascii=False, indent=2))
        return

    f = response.formatted
    print(f"下月应缴纳个税: {f.current_month_tax} ({f.projected_month})")
    print(f"当前税率:       {f.tax_rate}")
    print(f"累计工资收入:   {f.new_total_income}")
    print(f"累计应缴个税:   {f.total_tax_due}")
    print(f"适用税率区间:   {response.tax_rate.label}")


if __name__ == "__main__":
    main()
