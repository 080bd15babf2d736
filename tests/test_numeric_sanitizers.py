"""
Unit tests for clamp, rating, percentage and cast sanitizers.
Pins both fallbacks for non-numeric range input.
"""
import pytest

from sanitize_utils.services.sanitizers.numeric import (
    sanitize_absint,
    sanitize_float,
    sanitize_int,
    sanitize_int_range,
    sanitize_int_range_default_zero,
    sanitize_percentage,
    sanitize_range,
    sanitize_range_clamp_to_min,
    sanitize_range_default_zero,
    sanitize_rating,
)


class TestSanitizeRange:
    """Tests for float clamping."""

    def test_in_range_unchanged(self):
        assert sanitize_range("5", 0, 10) == 5.0
        assert sanitize_range(" 7.5 ", 0, 10) == 7.5

    def test_clamps_both_ends(self):
        assert sanitize_range(15, 0, 10) == 10.0
        assert sanitize_range(-3, 0, 10) == 0.0

    def test_returns_float(self):
        assert isinstance(sanitize_range(5, 0, 10), float)

    def test_default_is_clamp_to_min(self):
        assert sanitize_range is sanitize_range_clamp_to_min

    def test_non_numeric_clamps_to_min(self):
        assert sanitize_range_clamp_to_min("abc", 2, 10) == 2.0
        assert sanitize_range_clamp_to_min(None, -5, 5) == -5.0
        assert sanitize_range_clamp_to_min(True, 1, 3) == 1.0

    def test_non_numeric_defaults_to_zero(self):
        assert sanitize_range_default_zero("abc", -5, 5) == 0.0
        # zero itself is clamped when outside the bounds
        assert sanitize_range_default_zero("abc", 2, 10) == 2.0
        assert sanitize_range_default_zero("abc", -10, -2) == -2.0

    @pytest.mark.parametrize("value", [-100, -1, 0, 0.5, 3, 9.99, 10, 1e9, "4", "x", None])
    def test_always_within_bounds(self, value):
        for sanitize in (sanitize_range_clamp_to_min, sanitize_range_default_zero):
            assert 0 <= sanitize(value, 0, 10) <= 10


class TestSanitizeIntRange:
    """Tests for integer clamping."""

    def test_truncates_numeric(self):
        assert sanitize_int_range("7.9", 0, 10) == 7
        assert sanitize_int_range("-7.9", -10, 10) == -7

    def test_clamps(self):
        assert sanitize_int_range(99, 0, 10) == 10

    def test_non_numeric_uses_min(self):
        assert sanitize_int_range("x", 3, 9) == 3

    def test_default_zero_variant(self):
        assert sanitize_int_range_default_zero("x", -5, 5) == 0
        assert sanitize_int_range_default_zero("x", 3, 9) == 3


class TestSanitizeRating:
    """Tests for 1-5 ratings."""

    def test_valid_rating(self):
        assert sanitize_rating("4") == 4

    def test_out_of_bounds(self):
        assert sanitize_rating(10) == 5
        assert sanitize_rating(0) == 1

    def test_garbage(self):
        assert sanitize_rating("bad") == 1

    def test_custom_scale(self):
        assert sanitize_rating(8, 1, 10) == 8


class TestSanitizeCasts:
    """Tests for percentage, absint, int and float."""

    def test_percentage(self):
        assert sanitize_percentage("150") == 100.0
        assert sanitize_percentage("50.5") == 50.5
        assert sanitize_percentage("n/a") == 0.0

    def test_absint(self):
        assert sanitize_absint("-12") == 12
        assert sanitize_absint("12abc") == 12
        assert sanitize_absint("abc") == 0
        assert sanitize_absint(3.9) == 3

    def test_int(self):
        assert sanitize_int("42") == 42
        assert sanitize_int("4x", default=-1) == -1

    def test_float(self):
        assert sanitize_float("1e3") == 1000.0
        assert sanitize_float([], default=1.5) == 1.5
