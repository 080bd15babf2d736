"""
Host capabilities: the text, markup, email, URL, identifier, timezone,
date and JSON primitives sanitizers and validators build on.

Embedding applications that already own these rules (a CMS, a web
framework) subclass HostCapabilities and install it with
set_capabilities(). The defaults below follow common CMS conventions.

Input-safe: no method logs the value it receives.
"""
import json
import re
import threading
import unicodedata
from datetime import datetime
from functools import lru_cache
from html import escape
from html.parser import HTMLParser
from typing import Any, FrozenSet, Iterable, List, Optional, Tuple
from zoneinfo import available_timezones

from pydantic import AnyUrl, TypeAdapter
from pydantic.networks import validate_email

from sanitize_utils.core.config import get_settings
from sanitize_utils.core.logging import get_safe_logger
from sanitize_utils.services.exceptions import InvalidCapabilitiesError

logger = get_safe_logger(__name__)

# Text normalization patterns
_CONTROL_CHARS_REGEX = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_SCRIPT_STYLE_REGEX = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG_REGEX = re.compile(r"<[a-zA-Z/!?][^>]*>")
_WHITESPACE_REGEX = re.compile(r"[\r\n\t ]+")
_OCTET_REGEX = re.compile(r"%[a-f0-9]{2}", re.IGNORECASE)
_ENTITY_REGEX = re.compile(r"&[a-zA-Z0-9#]+;")

# Identifier patterns
_KEY_DISALLOWED_REGEX = re.compile(r"[^a-z0-9_\-]")
_SLUG_SEPARATORS_REGEX = re.compile(r"[\s./]+")
_SLUG_DISALLOWED_REGEX = re.compile(r"[^a-z0-9_\-]")
_DASHES_REGEX = re.compile(r"-+")
_USERNAME_DISALLOWED_REGEX = re.compile(r"[^a-zA-Z0-9 _.\-@]")
_SPACES_REGEX = re.compile(r" +")

# Attributes kept on allowed tags, everything else is dropped
_ALLOWED_ATTRIBUTES = {
    "a": frozenset({"href", "title"}),
    "abbr": frozenset({"title"}),
    "blockquote": frozenset({"cite"}),
}
_URL_ATTRIBUTES = frozenset({"href", "cite"})
_SAFE_URL_SCHEMES = frozenset({"http", "https", "mailto", "ftp", "tel"})
_VOID_TAGS = frozenset({"br", "hr", "img"})
_DROP_CONTENT_TAGS = frozenset({"script", "style"})

_URL_ADAPTER = TypeAdapter(AnyUrl)


@lru_cache(maxsize=1)
def _timezone_names() -> FrozenSet[str]:
    return frozenset(available_timezones())


def remove_accents(value: str) -> str:
    """Fold accented characters to their ASCII base letter."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _reject_json_constant(name: str) -> Any:
    raise ValueError(f"Not a JSON value: {name}")


def _is_safe_url(value: str) -> bool:
    """Relative URLs and URLs with an allowed scheme are safe."""
    compact = _CONTROL_CHARS_REGEX.sub("", value).strip().lower()
    compact = re.sub(r"\s+", "", compact)
    if ":" not in compact.split("/", 1)[0]:
        return True
    scheme = compact.split(":", 1)[0]
    return scheme in _SAFE_URL_SCHEMES


class _AllowListParser(HTMLParser):
    """Rebuilds markup keeping only allowed tags and attributes."""

    def __init__(self, allowed_tags: Iterable[str]):
        super().__init__(convert_charrefs=True)
        self.allowed_tags = frozenset(tag.lower() for tag in allowed_tags)
        self.parts: List[str] = []
        self.open_tags: List[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        if tag in _DROP_CONTENT_TAGS:
            self._skip_depth += 1
            return
        if self._skip_depth or tag not in self.allowed_tags:
            return
        self.parts.append(self._render_start(tag, attrs))
        if tag not in _VOID_TAGS:
            self.open_tags.append(tag)

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        if self._skip_depth or tag not in self.allowed_tags:
            return
        self.parts.append(self._render_start(tag, attrs))

    def handle_endtag(self, tag: str) -> None:
        if tag in _DROP_CONTENT_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
            return
        if self._skip_depth or tag not in self.open_tags:
            return
        # Close anything left open inside this tag
        while self.open_tags:
            current = self.open_tags.pop()
            self.parts.append(f"</{current}>")
            if current == tag:
                break

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self.parts.append(escape(data, quote=False))

    def _render_start(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> str:
        kept = []
        allowed = _ALLOWED_ATTRIBUTES.get(tag, frozenset())
        for name, value in attrs:
            if name not in allowed or value is None:
                continue
            if name in _URL_ATTRIBUTES and not _is_safe_url(value):
                continue
            kept.append(f' {name}="{escape(value, quote=True)}"')
        return f"<{tag}{''.join(kept)}>"

    def result(self) -> str:
        tail = [f"</{tag}>" for tag in reversed(self.open_tags)]
        return "".join(self.parts + tail)


class HostCapabilities:
    """
    Default host primitives.

    Subclass and override single methods to plug in the rules of the
    embedding application; sanitizers and validators only talk to the
    instance returned by get_capabilities().
    """

    name = "default"

    # --- text ---

    def normalize_text(self, value: Any) -> str:
        """
        Basic single-line text normalization.

        Rules:
        1. None becomes "", other non-strings are converted with str()
        2. Control characters are removed
        3. script/style blocks are dropped, remaining tags stripped
        4. A '<' that does not open a tag is kept as '&lt;'
        5. Line breaks, tabs and runs of spaces collapse to one space
        6. Percent-encoded octets are removed
        7. Leading and trailing whitespace is trimmed
        """
        if value is None:
            return ""
        text = value if isinstance(value, str) else str(value)

        text = _CONTROL_CHARS_REGEX.sub("", text)
        if "<" in text:
            text = _SCRIPT_STYLE_REGEX.sub("", text)
            text = _TAG_REGEX.sub("", text)
            text = text.replace("<", "&lt;")
        text = _WHITESPACE_REGEX.sub(" ", text).strip()

        if _OCTET_REGEX.search(text):
            text = _OCTET_REGEX.sub("", text)
            text = _WHITESPACE_REGEX.sub(" ", text).strip()

        return text

    def sanitize_html(self, value: Any, allowed_tags: Optional[Iterable[str]] = None) -> str:
        """Keep only allow-listed tags and attributes; escape everything else."""
        if value is None:
            return ""
        text = value if isinstance(value, str) else str(value)
        if allowed_tags is None:
            allowed_tags = get_settings().html_allowed_tags

        parser = _AllowListParser(allowed_tags)
        parser.feed(_CONTROL_CHARS_REGEX.sub("", text))
        parser.close()
        return parser.result().strip()

    # --- structural checks ---

    def is_email(self, value: str) -> bool:
        """Structural email check (no deliverability lookups)."""
        if not value or value != value.strip():
            return False
        # Display-name form ("Name <addr>") is not a bare address
        if "<" in value or ">" in value or " " in value:
            return False
        try:
            validate_email(value)
        except ValueError:
            return False
        return True

    def is_url(self, value: str) -> bool:
        """URL must carry a scheme and a host."""
        if not value or value != value.strip() or any(ch.isspace() for ch in value):
            return False
        try:
            url = _URL_ADAPTER.validate_python(value)
        except ValueError:
            return False
        return bool(url.scheme and url.host)

    # --- identifiers ---

    def sanitize_key(self, value: Any) -> str:
        """Lowercase key made of a-z, 0-9, underscores and dashes."""
        if value is None:
            return ""
        return _KEY_DISALLOWED_REGEX.sub("", str(value).lower())

    def sanitize_slug(self, value: Any) -> str:
        """URL slug: accents folded, lowercase, dash separated."""
        text = self.normalize_text(value)
        text = _ENTITY_REGEX.sub("", text)
        text = remove_accents(text).lower()
        text = _SLUG_SEPARATORS_REGEX.sub("-", text)
        text = _SLUG_DISALLOWED_REGEX.sub("", text)
        text = _DASHES_REGEX.sub("-", text)
        return text.strip("-")

    def sanitize_username(self, value: Any) -> str:
        """Strict username: a-z, 0-9, space, underscore, dot, dash and at-sign."""
        text = self.normalize_text(value)
        text = _ENTITY_REGEX.sub("", text)
        text = remove_accents(text)
        text = _USERNAME_DISALLOWED_REGEX.sub("", text)
        return _SPACES_REGEX.sub(" ", text).strip()

    def is_username(self, value: str) -> bool:
        """A username is valid when strict sanitization leaves it unchanged."""
        if not value:
            return False
        return self.sanitize_username(value) == value

    # --- dates, zones ---

    def timezones(self) -> FrozenSet[str]:
        """Registered IANA timezone identifiers."""
        return _timezone_names()

    def parse_datetime(self, value: str, fmt: str) -> Optional[datetime]:
        """Parse value with a strptime format, None on failure."""
        try:
            return datetime.strptime(value, fmt)
        except (TypeError, ValueError):
            return None

    # --- JSON ---

    def decode_json(self, text: str) -> Any:
        """
        Decode JSON text.

        NaN and Infinity are not JSON and are rejected. Nesting too deep for
        the decoder is reported the same way as any other invalid document.

        Raises:
            ValueError: when text is not valid JSON
        """
        try:
            return json.loads(text, parse_constant=_reject_json_constant)
        except RecursionError:
            raise ValueError("JSON nesting too deep") from None

    def encode_json(self, value: Any) -> str:
        """Compact, strict JSON encoding. Raises ValueError for NaN/Infinity."""
        return json.dumps(value, separators=(",", ":"), allow_nan=False)


_capabilities: HostCapabilities = HostCapabilities()
_lock = threading.Lock()


def get_capabilities() -> HostCapabilities:
    """Get the active host capabilities."""
    return _capabilities


def set_capabilities(capabilities: HostCapabilities) -> HostCapabilities:
    """
    Install host capabilities supplied by the embedding application.

    Returns:
        The previously active capabilities, so callers can restore them.
    """
    global _capabilities
    if not isinstance(capabilities, HostCapabilities):
        raise InvalidCapabilitiesError(type(capabilities).__name__)
    with _lock:
        previous = _capabilities
        _capabilities = capabilities
    logger.info("Host capabilities installed", capability=capabilities.name)
    return previous


def reset_capabilities() -> None:
    """Restore the default host capabilities."""
    set_capabilities(HostCapabilities())
