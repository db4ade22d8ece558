"""Text, number and boolean normalization helpers shared by the facet engine."""

import re
import unicodedata
from typing import Any, Optional, Pattern, Union

from facets.config import FALSE_TOKENS, TRUE_TOKENS

__all__ = [
    "normalize_key",
    "to_snake_case",
    "clean_value",
    "first_number",
    "format_number",
    "parse_bool",
    "bool_token",
    "title_from_key",
    "capitalize_first",
    "search_text",
    "fold_text",
]

_NUMBER_RE = re.compile(r"-?\d+(?:[.,]\d+)?")
_KEY_STRIP_RE = re.compile(r"[^0-9a-z+]")
_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_key(key: str) -> str:
    """Collapse a specification key to a comparable form.

    "Memory Type", "memoryType", "memory_type" and "memory-type" all become
    "memorytype".
    """
    return _KEY_STRIP_RE.sub("", str(key).lower())


def to_snake_case(name: str) -> str:
    """Convert a camelCase or spaced label to snake_case."""
    cleaned = _CAMEL_RE.sub("_", str(name).strip())
    cleaned = re.sub(r"[^\w]+", "_", cleaned.lower())
    return re.sub(r"_+", "_", cleaned).strip("_")


def clean_value(value: Any) -> Optional[str]:
    """Coerce a raw spec value to a trimmed string, or None when empty."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value).strip()
    return text or None


def first_number(value: Any) -> float:
    """Return the first numeric token embedded in a value.

    "3.5 GHz" -> 3.5, "2 x 16GB" -> 2.0. Values without digits parse to 0 so
    they sort to one end instead of raising.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return 0.0
    match = _NUMBER_RE.search(str(value))
    if not match:
        return 0.0
    try:
        return float(match.group().replace(",", "."))
    except ValueError:
        return 0.0


def format_number(value: Union[int, float]) -> str:
    """Render a number without a trailing ".0" (16.0 -> "16", 3.5 -> "3.5")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_bool(value: Any) -> Optional[bool]:
    """Interpret yes/no style values.

    Returns None when the value is not recognizably boolean.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return None
    text = str(value).strip().lower()
    if not text:
        return None
    if text in TRUE_TOKENS:
        return True
    if text in FALSE_TOKENS:
        return False
    if text.startswith(("not ", "no ", "without")):
        return False
    if text.startswith(("yes", "with ")):
        return True
    return None


def bool_token(value: Any) -> Optional[str]:
    """Canonical "true"/"false" token for a boolean-like value."""
    parsed = parse_bool(value)
    if parsed is None:
        return None
    return "true" if parsed else "false"


def title_from_key(key: str) -> str:
    """Derive a display title from a canonical key ("memory_type" -> "Memory Type")."""
    return " ".join(part.capitalize() for part in str(key).replace("_", " ").split())


def capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:] if value else value


def fold_text(value: str) -> str:
    """Accent-stripped, case-folded form used for locale-style comparisons."""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def search_text(pattern: Pattern[str], *texts: Optional[str]) -> Optional["re.Match[str]"]:
    """Return the first match of a pattern across several texts, in order."""
    for text in texts:
        if not text:
            continue
        match = pattern.search(text)
        if match:
            return match
    return None
