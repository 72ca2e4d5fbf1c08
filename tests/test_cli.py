"""Tests for the calculate CLI script."""

import json

import pytest

from scripts.calculate import main, parse_args

_ARGS = ["--total-income", "30000", "--total-tax-paid", "900", "--month", "2", "--next-income", "20000"]


def test_summary_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(_ARGS)
    out = capsys.readouterr().out
    assert "¥150.00" in out
    assert "第3月预计缴纳" in out
    assert "¥1,050.00" in out
    assert "第1级: 3%" in out


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    main([*_ARGS, "--insurance", "2000", "--special-deduction", "1500", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["total_tax_due"] == pytest.approx(735.0)
    assert data["current_month_tax"] == 0.0
    assert data["tax_rate"]["level"] == 1


def test_threshold_defaults_to_5000() -> None:
    args = parse_args(_ARGS)
    assert args.threshold == 5000


@pytest.mark.parametrize(
    "bad",
    [
        ["--month", "13"],
        ["--month", "0"],
        ["--month", "two"],
        ["--insurance", "-1"],
        ["--threshold", "nan"],
        ["--special-deduction", "abc"],
    ],
)
def test_invalid_arguments_exit_2(bad: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_args([*_ARGS, *bad])
    assert exc.value.code == 2
