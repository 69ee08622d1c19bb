import re
from typing import Any, List, Union

"""
Plain-text sanitation of request values.

    normalize("  <b>Java</b>Script ")   -> "JavaScript"
    normalize(["Berlin", "<i></i>"])   -> ["Berlin"]
    normalize(None)                    -> ""

Scalars stay scalars, lists stay lists. Nothing here raises on request data.
"""

NormalizedValue = Union[str, List[str]]

_SLASHED_CHAR = re.compile(r"\\(.)", re.DOTALL)
_SCRIPT_OR_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[a-zA-Z/!?][^>]*>?")
_OCTET = re.compile(r"%[a-fA-F0-9]{2}")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE = re.compile(r"\s+")


def unslash(value: str) -> str:
    """Undo backslash escaping: ``O\\'Brien`` -> ``O'Brien``."""
    value = _SLASHED_CHAR.sub(r"\1", value)
    return value[:-1] if value.endswith("\\") else value


def sanitize_text(value: str) -> str:
    """Reduce a value to a single line of plain text with no markup."""
    value = _SCRIPT_OR_STYLE.sub("", value)
    value = _TAG.sub("", value)
    # a "<" that does not open a tag is kept as text, but never as markup
    value = value.replace("<", "&lt;")

    # strip octets until none are left, "%2%4141" reveals a new one after one pass
    previous = None
    while previous != value:
        previous = value
        value = _OCTET.sub("", value)

    value = _CONTROL_CHARS.sub("", value)
    return _WHITESPACE.sub(" ", value).strip()


def _normalize_scalar(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="ignore")
    if isinstance(raw, (dict, list, tuple, set)):
        return ""
    return sanitize_text(unslash(str(raw)))


def normalize(raw: Any) -> NormalizedValue:
    """
    Sanitize a raw request value, preserving its shape.

    :param raw: a string-like scalar or a list/tuple of them
    :return: a sanitized string, or a list of sanitized non-empty strings
    """
    if isinstance(raw, (list, tuple)):
        cleaned = (_normalize_scalar(element) for element in raw)
        return [element for element in cleaned if element]
    return _normalize_scalar(raw)
