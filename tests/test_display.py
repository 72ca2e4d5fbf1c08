"""Tests for result display formatting."""

from decimal import Decimal

import pytest

from withholding.calculators.display import (
    bracket_label,
    format_currency,
    format_percent,
    projected_month_label,
)
from withholding.calculators.tax_data import TAX_BRACKETS


class TestFormatCurrency:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("0"), "¥0.00"),
            (Decimal("150"), "¥150.00"),
            (Decimal("1050.00"), "¥1,050.00"),
            (Decimal("1234567.891"), "¥1,234,567.89"),
            (Decimal("0.005"), "¥0.01"),
            (960000, "¥960,000.00"),
        ],
    )
    def test_format(self, amount: Decimal, expected: str) -> None:
        assert format_currency(amount) == expected

    def test_negative(self) -> None:
        assert format_currency(Decimal("-12.345")) == "-¥12.35"

    def test_negative_rounding_to_zero_has_no_sign(self) -> None:
        assert format_currency(Decimal("-0.001")) == "¥0.00"

    def test_beyond_default_precision(self) -> None:
        """1e27 needs 30 digits once quantized to cents."""
        assert format_currency(Decimal("1e27")) == "¥1,000,000,000,000,000,000,000,000,000.00"

    def test_large_value_with_cents(self) -> None:
        assert format_currency(Decimal("123456789012345678901234567.895")) == (
            "¥123,456,789,012,345,678,901,234,567.90"
        )

    def test_non_finite(self) -> None:
        assert format_currency(Decimal("NaN")) == "¥NaN"
        assert format_currency(float("inf")) == "¥∞"
        assert format_currency(float("-inf")) == "-¥∞"


class TestFormatPercent:
    def test_table_rates(self) -> None:
        assert [format_percent(b.rate) for b in TAX_BRACKETS] == [
            "3%", "10%", "20%", "25%", "30%", "35%", "45%",
        ]

    def test_rounds_to_whole_percent(self) -> None:
        assert format_percent(Decimal("0.025")) == "3%"
        assert format_percent(0.124) == "12%"

    def test_non_finite(self) -> None:
        assert format_percent(Decimal("NaN")) == "NaN%"
        assert format_percent(float("inf")) == "∞%"


class TestLabels:
    def test_projected_month(self) -> None:
        assert projected_month_label(2) == "第3月预计缴纳"

    def test_projected_month_after_december(self) -> None:
        """The label does not wrap: December projects 'month 13'."""
        assert projected_month_label(12) == "第13月预计缴纳"

    def test_bracket_label_with_threshold(self) -> None:
        assert bracket_label(TAX_BRACKETS[2]) == "第3级: 20% (超过¥144,000.00/年)"

    def test_first_bracket_label(self) -> None:
        assert bracket_label(TAX_BRACKETS[0]) == "第1级: 3% (超过¥0.00/年)"

    def test_top_bracket_has_no_threshold_note(self) -> None:
        assert bracket_label(TAX_BRACKETS[6]) == "第7级: 45%"
