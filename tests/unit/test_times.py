"""Unit tests for showtime parsing."""

import pytest

from dcscreenings.utils.times import (
    AssumeEveningBelowTen,
    FixedDefault,
    RequireMeridiem,
    parse_time,
)


class TestExplicitMeridiem:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12:00 AM", "00:00"),
            ("12:00 PM", "12:00"),
            ("7:05 PM", "19:05"),
            ("11:59 AM", "11:59"),
        ],
    )
    def test_twelve_hour_conversion(self, raw: str, expected: str) -> None:
        assert parse_time(raw, RequireMeridiem()) == expected

    def test_lowercase_without_space(self) -> None:
        assert parse_time("7:30pm", RequireMeridiem()) == "19:30"

    def test_dotted_marker(self) -> None:
        assert parse_time("2:00 p.m.", RequireMeridiem()) == "14:00"

    def test_dotted_am_marker(self) -> None:
        assert parse_time("10:15 a.m.", RequireMeridiem()) == "10:15"

    def test_uses_first_time_in_a_range(self) -> None:
        assert parse_time("2:00 p.m. – 3:45 p.m.", RequireMeridiem()) == "14:00"

    def test_marker_wins_over_convention(self) -> None:
        assert parse_time("9:00 AM", AssumeEveningBelowTen()) == "09:00"
        assert parse_time("9:00 AM", FixedDefault("19:00")) == "09:00"

    def test_time_embedded_in_text(self) -> None:
        assert parse_time("Showtime: 8:45 PM (Screen 2)", RequireMeridiem()) == "20:45"

    def test_word_starting_with_am_is_not_a_marker(self) -> None:
        assert parse_time("7:00 Amelie", RequireMeridiem()) is None

    def test_out_of_range_hour_is_rejected(self) -> None:
        assert parse_time("13:00 PM", RequireMeridiem()) is None

    def test_output_is_zero_padded(self) -> None:
        assert parse_time("1:05 AM", RequireMeridiem()) == "01:05"


class TestAssumeEveningBelowTen:
    def setup_method(self) -> None:
        self.convention = AssumeEveningBelowTen()

    def test_single_digit_hour_is_evening(self) -> None:
        assert parse_time("7:00", self.convention) == "19:00"

    def test_ten_thirty_is_morning(self) -> None:
        assert parse_time("10:30", self.convention) == "10:30"

    def test_eleven_is_morning(self) -> None:
        assert parse_time("11:15", self.convention) == "11:15"

    def test_one_is_evening(self) -> None:
        assert parse_time("1:00", self.convention) == "13:00"

    def test_twenty_four_hour_value_passes_through(self) -> None:
        assert parse_time("15:30", self.convention) == "15:30"

    def test_hour_zero_passes_through(self) -> None:
        assert parse_time("0:45", self.convention) == "00:45"

    def test_noon_passes_through(self) -> None:
        assert parse_time("12:30", self.convention) == "12:30"

    def test_invalid_hour_is_rejected(self) -> None:
        assert parse_time("27:00", self.convention) is None

    def test_no_digits_returns_none(self) -> None:
        assert parse_time("Sold out", self.convention) is None

    def test_none_input_returns_none(self) -> None:
        assert parse_time(None, self.convention) is None


class TestFixedDefault:
    def test_empty_text_uses_default(self) -> None:
        assert parse_time("", FixedDefault("19:00")) == "19:00"

    def test_text_without_time_uses_default(self) -> None:
        assert parse_time("TBA", FixedDefault("19:00")) == "19:00"

    def test_ambiguous_time_uses_default(self) -> None:
        assert parse_time("7:30", FixedDefault("20:00")) == "20:00"

    def test_rejects_malformed_default(self) -> None:
        with pytest.raises(ValueError):
            FixedDefault("7pm")


class TestRequireMeridiem:
    def test_bare_time_is_rejected(self) -> None:
        assert parse_time("7:00", RequireMeridiem()) is None

    def test_no_digits_returns_none(self) -> None:
        assert parse_time("Tonight", RequireMeridiem()) is None
