"""Unit tests for title text utilities."""

from dcscreenings.utils.text import (
    clean_title,
    extract_year,
    is_plausible_title,
    normalise_title,
)


class TestCleanTitle:
    def test_passthrough_clean_title(self) -> None:
        assert clean_title("Nosferatu") == "Nosferatu"

    def test_collapses_newlines_and_spaces(self) -> None:
        assert clean_title("  The\n   Substance \t") == "The Substance"

    def test_keeps_prefixes_and_years(self) -> None:
        assert clean_title("Preview: Near Dark (1987)") == "Preview: Near Dark (1987)"

    def test_none_becomes_empty_string(self) -> None:
        assert clean_title(None) == ""


class TestIsPlausibleTitle:
    def test_accepts_normal_title(self) -> None:
        assert is_plausible_title("Movie X")

    def test_rejects_empty(self) -> None:
        assert not is_plausible_title("")

    def test_accepts_exactly_one_hundred_chars(self) -> None:
        assert is_plausible_title("x" * 100)

    def test_rejects_container_text(self) -> None:
        assert not is_plausible_title("x" * 101)


class TestExtractYear:
    def test_extracts_trailing_year(self) -> None:
        assert extract_year("Near Dark (1987)") == "1987"

    def test_returns_none_without_year(self) -> None:
        assert extract_year("Near Dark") is None

    def test_ignores_mid_title_year(self) -> None:
        assert extract_year("1917 (Director's Cut)") is None


class TestNormaliseTitle:
    def test_passthrough_clean_title(self) -> None:
        assert normalise_title("Nosferatu") == "Nosferatu"

    def test_removes_year_suffix(self) -> None:
        assert normalise_title("Nosferatu (2024)") == "Nosferatu"

    def test_removes_year_range_suffix(self) -> None:
        assert normalise_title("The Crown (2016-23)") == "The Crown"

    def test_removes_preview_prefix(self) -> None:
        assert normalise_title("Preview: The Film") == "The Film"

    def test_removes_alamo_series_prefix(self) -> None:
        assert normalise_title("Terror Tuesday: The Thing") == "The Thing"

    def test_removes_member_screening_prefix(self) -> None:
        assert normalise_title("Members Screening: The Film") == "The Film"

    def test_removes_square_bracket_format_tag(self) -> None:
        assert normalise_title("Nosferatu [35mm]") == "Nosferatu"

    def test_removes_trailing_non_numeric_parenthetical(self) -> None:
        assert normalise_title("Nosferatu (Director's Cut)") == "Nosferatu"

    def test_removes_dash_suffix(self) -> None:
        assert normalise_title("Vertigo — 4K Restoration") == "Vertigo"

    def test_keeps_hyphenated_title(self) -> None:
        assert normalise_title("Spider-Man") == "Spider-Man"

    def test_collapses_extra_whitespace(self) -> None:
        assert normalise_title("The   Film") == "The Film"

    def test_returns_empty_string_unchanged(self) -> None:
        assert normalise_title("") == ""

    def test_prefix_removal_is_case_insensitive(self) -> None:
        assert normalise_title("PREVIEW: The Film") == "The Film"

    def test_combines_multiple_normalizations(self) -> None:
        assert normalise_title("Preview: The Film [35mm] (2024)") == "The Film"
