"""
Unit tests for email, URL, phone, color, date, time and timezone sanitizers.
"""
from datetime import date, datetime

import pytest

from sanitize_utils.core.config import get_settings
from sanitize_utils.services.sanitizers.contact import (
    sanitize_email,
    sanitize_hex_color,
    sanitize_phone,
    sanitize_url,
)
from sanitize_utils.services.sanitizers.dates import (
    sanitize_date,
    sanitize_time,
    sanitize_timezone,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSanitizeEmail:
    """Tests for single email addresses."""

    def test_trims_and_lowercases_domain(self):
        assert sanitize_email("  Jane.Doe@GMAIL.com ") == "Jane.Doe@gmail.com"

    def test_invalid(self):
        assert sanitize_email("not an email") == ""
        assert sanitize_email(None) == ""


class TestSanitizeUrl:
    """Tests for URLs."""

    def test_valid_url_trimmed(self):
        assert sanitize_url(" https://example.org/path?q=1 ") == "https://example.org/path?q=1"

    def test_missing_scheme_or_host(self):
        assert sanitize_url("example") == ""
        assert sanitize_url("javascript:alert(1)") == ""
        assert sanitize_url(None) == ""


class TestSanitizePhone:
    """Tests for phone numbers."""

    def test_keeps_shape_and_plus(self):
        assert sanitize_phone("+1 (555) 123-4567 ext") == "+1 (555) 123-4567"

    def test_plain_number(self):
        assert sanitize_phone("555.1234") == "5551234"

    def test_no_digits(self):
        assert sanitize_phone("abc") == ""


class TestSanitizeHexColor:
    """Tests for hex colors."""

    def test_valid_colors(self):
        assert sanitize_hex_color("#FFAA00") == "#ffaa00"
        assert sanitize_hex_color("fa0") == "#fa0"
        assert sanitize_hex_color(" #abc ") == "#abc"

    def test_invalid_colors(self):
        assert sanitize_hex_color("#ggg") == ""
        assert sanitize_hex_color("#abcd") == ""
        assert sanitize_hex_color(123) == ""


class TestSanitizeDate:
    """Tests for dates."""

    def test_configured_format(self):
        assert sanitize_date("2024-03-05") == "2024-03-05"

    def test_iso_fallback(self):
        assert sanitize_date("2024-03-05T10:30:00") == "2024-03-05"

    def test_explicit_format(self):
        assert sanitize_date("05/03/2024", fmt="%d/%m/%Y") == "05/03/2024"

    def test_date_objects(self):
        assert sanitize_date(date(2024, 1, 2)) == "2024-01-02"
        assert sanitize_date(datetime(2024, 1, 2, 8, 0)) == "2024-01-02"

    def test_unreadable(self):
        assert sanitize_date("not a date") == ""
        assert sanitize_date("2024-02-30") == ""
        assert sanitize_date(None) == ""

    def test_settings_format(self, monkeypatch):
        monkeypatch.setenv("SANITIZE_UTILS_DATE_FORMAT", "%d.%m.%Y")
        get_settings.cache_clear()
        assert sanitize_date("2024-03-05") == "05.03.2024"


class TestSanitizeTime:
    """Tests for times."""

    def test_configured_format(self):
        assert sanitize_time("14:30") == "14:30"

    def test_iso_fallback_drops_seconds(self):
        assert sanitize_time("14:30:59") == "14:30"

    def test_unreadable(self):
        assert sanitize_time("25:00") == ""
        assert sanitize_time("") == ""


class TestSanitizeTimezone:
    """Tests for timezone names."""

    def test_registered(self):
        assert sanitize_timezone("Europe/Paris") == "Europe/Paris"

    def test_unknown_uses_default(self):
        assert sanitize_timezone("Mars/Base") == "UTC"
        assert sanitize_timezone("Nope", default="Europe/Berlin") == "Europe/Berlin"
        assert sanitize_timezone(None) == "UTC"
