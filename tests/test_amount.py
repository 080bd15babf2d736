"""
Unit tests for amount normalization.
Tests separators, residue handling, rounding and config overrides.
"""
import re
from decimal import Decimal

import pytest
from pydantic import ValidationError

from sanitize_utils.core.config import get_settings
from sanitize_utils.schemas.amount import AmountConfig
from sanitize_utils.services.sanitizers.amount import normalize_amount, sanitize_amount


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestNormalizeAmountStrings:
    """Tests for string input with the default config."""

    def test_plain_amount(self):
        assert normalize_amount("1234.5") == "1234.50"

    def test_strips_currency_and_thousands(self):
        assert normalize_amount("$1,234.50") == "1234.50"
        assert normalize_amount("USD 1,000,000") == "1000000.00"

    def test_strips_spaces(self):
        assert normalize_amount(" 1 234.5 ") == "1234.50"

    def test_negative_kept_by_default(self):
        assert normalize_amount("-15.5") == "-15.50"

    def test_empty_and_garbage_become_zero(self):
        assert normalize_amount("") == "0.00"
        assert normalize_amount("abc") == "0.00"
        assert normalize_amount(None) == "0.00"
        assert normalize_amount("--") == "0.00"

    def test_embedded_signs_read_leading_number(self):
        assert normalize_amount("1-2.3") == "1.00"
        assert normalize_amount("-1.2.3") == "-1.20"

    def test_rounds_half_away_from_zero(self):
        assert normalize_amount("2.345") == "2.35"
        assert normalize_amount("-2.345") == "-2.35"
        assert normalize_amount("2.344") == "2.34"

    def test_negative_zero_has_no_sign(self):
        assert normalize_amount("-0.001") == "0.00"
        assert normalize_amount("-0") == "0.00"

    def test_long_amounts_keep_every_digit(self):
        assert normalize_amount("9" * 30) == "9" * 30 + ".00"


class TestNormalizeAmountNumbers:
    """Tests for numeric input."""

    def test_int_and_float(self):
        assert normalize_amount(12) == "12.00"
        assert normalize_amount(12.5) == "12.50"

    def test_decimal(self):
        assert normalize_amount(Decimal("3.14159")) == "3.14"

    def test_float_uses_shortest_repr(self):
        assert normalize_amount(1.005) == "1.01"

    def test_bool_and_nan(self):
        assert normalize_amount(True) == "1.00"
        assert normalize_amount(float("nan")) == "0.00"
        assert normalize_amount(float("inf")) == "0.00"

    def test_containers_carry_no_amount(self):
        assert normalize_amount([1, 2]) == "0.00"
        assert normalize_amount({"total": "12.50"}) == "0.00"
        assert normalize_amount(object()) == "0.00"


class TestAmountConfigOverrides:
    """Tests for caller-supplied config."""

    def test_decimals_override(self):
        assert normalize_amount("1.23456", {"decimals": 4}) == "1.2346"

    def test_zero_decimals_has_no_point(self):
        assert normalize_amount("10", {"decimals": 0}) == "10"
        assert normalize_amount("10.5", {"decimals": 0}) == "11"

    def test_disallow_negative(self):
        assert normalize_amount("-15.5", {"allow_negative": False}) == "15.50"

    def test_european_layout(self):
        config = {"decimal_separator": ",", "thousands_separator": "."}
        assert normalize_amount("1.234,56", config) == "1234.56"

    def test_comma_decimal_alone_swaps_thousands(self):
        assert normalize_amount("1.234,56", {"decimal_separator": ","}) == "1234.56"

    def test_config_instance(self):
        config = AmountConfig(decimals=1, allow_negative=False)
        assert normalize_amount("-7.25", config) == "7.3"

    def test_unknown_keys_ignored(self):
        assert normalize_amount("5", {"currency": "EUR"}) == "5.00"

    def test_invalid_config_raises(self):
        with pytest.raises(ValidationError):
            normalize_amount("5", {"decimals": -1})
        with pytest.raises(ValidationError):
            normalize_amount("5", {"decimal_separator": ".", "thousands_separator": "."})

    def test_settings_drive_defaults(self, monkeypatch):
        monkeypatch.setenv("SANITIZE_UTILS_AMOUNT_DECIMALS", "3")
        get_settings.cache_clear()
        assert normalize_amount("1.5") == "1.500"


class TestAmountProperties:
    """Shape and idempotence of the output."""

    SAMPLES = ["0", "1", "1.5", "-3.14159", "1,234,567.891", "0.005", "-0.5", "42"]

    @pytest.mark.parametrize("decimals", [1, 2, 3, 4])
    def test_output_shape(self, decimals):
        pattern = re.compile(rf"^-?\d+\.\d{{{decimals}}}$")
        for sample in self.SAMPLES:
            assert pattern.match(normalize_amount(sample, {"decimals": decimals}))

    def test_idempotent(self):
        for sample in self.SAMPLES + ["$9,999.999", "abc", ""]:
            once = normalize_amount(sample)
            assert normalize_amount(once) == once

    def test_sanitize_amount_alias(self):
        assert sanitize_amount("$5") == normalize_amount("$5") == "5.00"
