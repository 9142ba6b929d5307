from decimal import Decimal

import pytest

from core.errors import ParseError
from core.parsing import date_from_filename, extract_date, parse_decimal


def test_missing_and_empty_numbers_are_zero():
    assert parse_decimal(None) == Decimal("0")
    assert parse_decimal("") == Decimal("0")
    assert parse_decimal("   ") == Decimal("0")


def test_numbers_parse_exactly():
    assert parse_decimal("101.25") == Decimal("101.25")
    assert parse_decimal("-3") == Decimal("-3")
    assert parse_decimal(" 1e3 ") == Decimal("1000")


@pytest.mark.parametrize("text", ["abc", "1,234.5", "NaN", "Infinity"])
def test_unparseable_non_empty_raises_parse_error(text):
    with pytest.raises(ParseError) as ei:
        parse_decimal(text, "net_pnl")
    assert ei.value.field == "net_pnl"
    assert ei.value.value == text
    assert isinstance(ei.value, ValueError)


def test_date_from_iso_timestamp():
    assert extract_date("2025-12-04T15:31:00", "", "trades.csv") == "2025-12-04"


def test_date_from_space_separated_timestamp():
    assert extract_date("2025-12-31 10:28:38", "", "trades.csv") == "2025-12-31"


def test_time_only_uses_compact_filename_date():
    assert extract_date("09:52", "", "live_trades_20251231_152554.csv") == "2025-12-31"


def test_time_only_prefers_iso_filename_date():
    assert extract_date("09:52", "", "gblast_2025-11-03_run20251231.csv") == "2025-11-03"


def test_time_only_without_filename_date():
    assert extract_date("09:52", "", "live_trades.csv") is None


def test_exit_time_used_when_entry_missing():
    assert extract_date("", "2025-10-01T09:15:00", "x.csv") == "2025-10-01"
    assert extract_date("", "14:05", "trades_20251002.csv") == "2025-10-02"


def test_entry_time_wins_over_exit_time():
    assert extract_date("2025-01-02 09:00:00", "2025-01-03 10:00:00", "x.csv") == "2025-01-02"


def test_unrecognized_shape_yields_no_date():
    # time-only but longer than 5 characters
    assert extract_date("10:28:38", "", "trades_20251002.csv") is None
    assert extract_date("", "", "trades_20251002.csv") is None


def test_date_from_filename_uses_basename():
    assert date_from_filename("/data/2024-01-01/trades.csv") is None
    assert date_from_filename("/data/x/trades_20240105.csv") == "2024-01-05"
