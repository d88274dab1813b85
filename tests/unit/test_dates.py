"""Unit tests for listing date parsing."""

from datetime import date

from dcscreenings.utils.dates import infer_year, parse_date

DECEMBER_2025 = date(2025, 12, 1)


class TestParseDate:
    def test_full_month_with_year(self) -> None:
        assert parse_date("December 22, 2025", DECEMBER_2025) == "2025-12-22"

    def test_explicit_year_ignores_reference(self) -> None:
        assert parse_date("March 3, 2027", DECEMBER_2025) == "2027-03-03"

    def test_abbreviated_month_same_year(self) -> None:
        assert parse_date("Dec 22", DECEMBER_2025) == "2025-12-22"

    def test_year_rollover(self) -> None:
        assert parse_date("Jan 2", DECEMBER_2025) == "2026-01-02"

    def test_weekday_prefix(self) -> None:
        assert parse_date("Sat, Dec 27", DECEMBER_2025) == "2025-12-27"

    def test_full_weekday_prefix(self) -> None:
        assert parse_date("Saturday, December 27", DECEMBER_2025) == "2025-12-27"

    def test_opens_on(self) -> None:
        assert parse_date("Opens on Jan 9", DECEMBER_2025) == "2026-01-09"

    def test_opens_on_full_month(self) -> None:
        assert parse_date("Opens on December 19", DECEMBER_2025) == "2025-12-19"

    def test_iso_passthrough(self) -> None:
        assert parse_date("2025-12-27", DECEMBER_2025) == "2025-12-27"

    def test_iso_timestamp_keeps_date(self) -> None:
        assert parse_date("2025-12-27T19:00:00-05:00", DECEMBER_2025) == "2025-12-27"

    def test_case_insensitive_month(self) -> None:
        assert parse_date("DEC 27", DECEMBER_2025) == "2025-12-27"

    def test_sept_abbreviation(self) -> None:
        assert parse_date("Sept 5", date(2025, 8, 1)) == "2025-09-05"

    def test_ordinal_suffix(self) -> None:
        assert parse_date("Dec 27th", DECEMBER_2025) == "2025-12-27"

    def test_single_digit_day_is_padded(self) -> None:
        assert parse_date("Dec 5", DECEMBER_2025) == "2025-12-05"

    def test_unknown_month_returns_none(self) -> None:
        assert parse_date("Smarch 5", DECEMBER_2025) is None

    def test_no_date_returns_none(self) -> None:
        assert parse_date("Now playing", DECEMBER_2025) is None

    def test_empty_returns_none(self) -> None:
        assert parse_date("", DECEMBER_2025) is None

    def test_impossible_date_returns_none(self) -> None:
        assert parse_date("Feb 30", DECEMBER_2025) is None

    def test_impossible_iso_date_returns_none(self) -> None:
        assert parse_date("2025-13-01", DECEMBER_2025) is None


class TestInferYear:
    def test_same_month_is_this_year(self) -> None:
        assert infer_year(12, DECEMBER_2025) == 2025

    def test_earlier_month_is_next_year(self) -> None:
        assert infer_year(1, DECEMBER_2025) == 2026

    def test_later_month_is_this_year(self) -> None:
        assert infer_year(8, date(2025, 3, 15)) == 2025
