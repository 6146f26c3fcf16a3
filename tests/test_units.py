"""
Tests for the length heuristics.

Covers clamp() matching, single-length normalization and the averaged
pixel estimate.
"""

import pytest

from theme_preview.core import (
    ClampExpression,
    length_to_approx_pixels,
    length_to_px,
    parse_clamp,
    parse_leading_number,
    round_half_up,
)


class TestParseClamp:
    """Tests for the clamp() matcher."""

    def test_matches_three_arguments(self):
        """Arguments are captured and stripped."""
        expr = parse_clamp("clamp(1rem,  20px ,2vw)")
        assert expr == ClampExpression(minimum="1rem", preferred="20px", maximum="2vw")

    def test_case_insensitive(self):
        """CLAMP is matched like clamp."""
        assert parse_clamp("CLAMP(1rem, 2rem, 3rem)") is not None

    def test_plain_length_is_none(self):
        """A plain length is not a clamp expression."""
        assert parse_clamp("1.5rem") is None

    @pytest.mark.parametrize("value", ["", None, 16, ["clamp(1rem, 2rem, 3rem)"]])
    def test_empty_or_non_string_is_none(self, value):
        """Empty and non-string values never match."""
        assert parse_clamp(value) is None

    def test_two_arguments_is_none(self):
        """clamp() needs all three arguments."""
        assert parse_clamp("clamp(1rem, 2rem)") is None


class TestLengthToPx:
    """Tests for single-length normalization."""

    def test_rem_times_sixteen(self):
        assert length_to_px("1rem") == 16
        assert length_to_px("1.5rem") == 24

    def test_px_as_is(self):
        assert length_to_px("20px") == 20

    def test_vw_against_1920(self):
        assert length_to_px("2vw") == pytest.approx(38.4)

    def test_bare_number(self):
        assert length_to_px("12") == 12

    def test_unknown_unit_uses_number(self):
        """Units outside rem/px/vw fall back to the bare number."""
        assert length_to_px("3em") == 3

    @pytest.mark.parametrize("value", ["abc", "calc(1rem + 2vw)", "", "rem"])
    def test_malformed_is_zero(self, value):
        """Values without a numeric prefix degrade to 0."""
        assert length_to_px(value) == 0

    def test_custom_constants(self):
        """Root font size and viewport width can be overridden."""
        assert length_to_px("1rem", root_font_size=10) == 10
        assert length_to_px("10vw", viewport_width=1000) == 100


class TestLeadingNumber:
    """Tests for parse_leading_number."""

    def test_parses_prefix(self):
        assert parse_leading_number("1.25rem") == 1.25
        assert parse_leading_number("-2px") == -2
        assert parse_leading_number(".5vw") == 0.5

    def test_no_prefix(self):
        assert parse_leading_number("px") is None


class TestApproxPixels:
    """Tests for the averaged clamp() estimate."""

    def test_mixed_units(self):
        """1rem, 20px and 2vw are 16, 20 and 38.4; the mean 24.8 rounds to 25."""
        assert length_to_approx_pixels("clamp(1rem, 20px, 2vw)") == 25

    def test_docstring_examples(self):
        """The documented examples agree with the implementation."""
        import doctest

        from theme_preview.core import units

        assert doctest.testmod(units).failed == 0

    def test_rounds_to_nearest(self):
        assert length_to_approx_pixels("clamp(1rem, 1rem, 1.5rem)") == 19  # 18.67

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2

    def test_plain_length_has_no_estimate(self):
        assert length_to_approx_pixels("2rem") is None
        assert length_to_approx_pixels("") is None

    def test_malformed_argument_counts_as_zero(self):
        """One bad argument does not fail the whole estimate."""
        assert length_to_approx_pixels("clamp(abc, 30px, 3rem)") == 26  # (0 + 30 + 48) / 3

    def test_calc_argument_degrades(self):
        assert length_to_approx_pixels("clamp(1rem, calc(1rem + 2vw), 2rem)") == 16  # (16+0+32)/3
