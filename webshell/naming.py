"""
App name helpers.

- sanitize_filename: drop characters no common filesystem accepts in a file name
- strip_non_ascii: keep the name portable across shell launchers
- kebab_case: lowercase words joined by hyphens
"""

from __future__ import annotations

import re
import unicodedata

_ILLEGAL = re.compile(r'[/?<>\\:*|"]')
_CONTROL = re.compile(r"[\x00-\x1f\x80-\x9f]")
_DOTS_ONLY = re.compile(r"^\.+$")
_WINDOWS_RESERVED = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_WINDOWS_TRAILING = re.compile(r"[. ]+$")
_NON_ASCII = re.compile(r"[^\x00-\x7F]")

_APOSTROPHES = re.compile(r"['’]")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_WORD = re.compile(r"[^\W_]+")

MAX_FILENAME_BYTES = 255


def sanitize_filename(text: str) -> str:
    """
    Remove characters that are illegal in file names.

    Rules:
    - Path separators and reserved punctuation are removed.
    - Control characters are removed.
    - Names made only of dots and Windows device names become empty.
    - Trailing dots and spaces are removed (Windows drops them silently).
    - Result is truncated to 255 UTF-8 bytes.
    """
    cleaned = _ILLEGAL.sub("", text)
    cleaned = _CONTROL.sub("", cleaned)
    if _DOTS_ONLY.match(cleaned) or _WINDOWS_RESERVED.match(cleaned):
        return ""
    cleaned = _WINDOWS_TRAILING.sub("", cleaned)

    encoded = cleaned.encode("utf-8")
    if len(encoded) > MAX_FILENAME_BYTES:
        cleaned = encoded[:MAX_FILENAME_BYTES].decode("utf-8", errors="ignore")
    return cleaned


def strip_non_ascii(text: str) -> str:
    return _NON_ASCII.sub("", text)


def _deburr(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def kebab_case(text: str) -> str:
    """'My Cool App' -> 'my-cool-app', 'MyCoolApp' -> 'my-cool-app'."""
    text = _APOSTROPHES.sub("", _deburr(text))
    text = _LOWER_UPPER.sub(r"\1 \2", text)
    text = _ACRONYM_WORD.sub(r"\1 \2", text)
    return "-".join(word.lower() for word in _WORD.findall(text))
