"""
Unit tests for installing host capabilities.
Sanitizers and validators must go through the installed instance.
"""
import pytest

from sanitize_utils.core.capabilities import (
    HostCapabilities,
    get_capabilities,
    remove_accents,
    reset_capabilities,
    set_capabilities,
)
from sanitize_utils.services.exceptions import InvalidCapabilitiesError, SanitizeErrorCode
from sanitize_utils.services.sanitizers import sanitize_emails, sanitize_text, sanitize_timezone
from sanitize_utils.services.validators import is_email, is_timezone


class ShoutingCapabilities(HostCapabilities):
    name = "shouting"

    def normalize_text(self, value):
        return super().normalize_text(value).upper()


class CorporateCapabilities(HostCapabilities):
    name = "corporate"

    def is_email(self, value):
        return isinstance(value, str) and value.endswith("@corp")

    def timezones(self):
        return frozenset({"Office/HQ"})


@pytest.fixture(autouse=True)
def default_capabilities():
    reset_capabilities()
    yield
    reset_capabilities()


class TestCapabilityRegistry:
    """Tests for get/set/reset."""

    def test_default_instance(self):
        assert type(get_capabilities()) is HostCapabilities

    def test_set_returns_previous(self):
        previous = get_capabilities()
        custom = ShoutingCapabilities()
        assert set_capabilities(custom) is previous
        assert get_capabilities() is custom

    def test_reset(self):
        set_capabilities(ShoutingCapabilities())
        reset_capabilities()
        assert type(get_capabilities()) is HostCapabilities

    def test_rejects_other_objects(self):
        with pytest.raises(InvalidCapabilitiesError) as exc_info:
            set_capabilities(object())
        assert exc_info.value.error_code == SanitizeErrorCode.INVALID_CAPABILITIES
        assert isinstance(exc_info.value, TypeError)


class TestCapabilitiesAreUsed:
    """Tests that functions consult the installed capabilities."""

    def test_text_normalization(self):
        set_capabilities(ShoutingCapabilities())
        assert sanitize_text(" hello ") == "HELLO"

    def test_email_rules(self):
        set_capabilities(CorporateCapabilities())
        assert is_email("ann@corp")
        assert not is_email("ann@gmail.com")
        assert sanitize_emails("ann@corp\nbob@gmail.com") == ["ann@corp"]

    def test_timezone_registry(self):
        set_capabilities(CorporateCapabilities())
        assert is_timezone("Office/HQ")
        assert not is_timezone("Europe/Paris")
        assert sanitize_timezone("Office/HQ") == "Office/HQ"


class TestDefaultCapabilities:
    """Tests for the default primitives."""

    def test_remove_accents(self):
        assert remove_accents("Crème Brûlée") == "Creme Brulee"

    def test_parse_datetime_failure_is_none(self):
        assert HostCapabilities().parse_datetime("nope", "%Y") is None

    def test_encode_json_is_compact(self):
        assert HostCapabilities().encode_json({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_decode_json_raises_value_error(self):
        with pytest.raises(ValueError):
            HostCapabilities().decode_json("{")
