"""Name helpers: title-casing identifiers and reading enum type descriptions."""

from __future__ import annotations

import re

# Matches "enum('a','b')" and "enum.name('a','b')".
_ENUM_PATTERN = re.compile(r"^enum(?:\.(\w+))?\((.*)\)$", re.DOTALL)


def title_case(name: str) -> str:
    """Turn a snake_case identifier into TitleCase.

    Underscores, spaces and dashes separate words. Each word gets its first
    character upper-cased and the rest kept as written.
    """
    words = re.split(r"[_\s\-]+", name)
    return "".join(word[:1].upper() + word[1:] for word in words if word)


def _match_enum(db_type: str) -> re.Match[str] | None:
    return _ENUM_PATTERN.match(db_type.strip())


def parse_enum_vals(db_type: str) -> list[str]:
    """Return the values of an enum type description, or an empty list.

    Accepts both ``enum('a','b')`` and ``enum.name('a','b')``.
    """
    match = _match_enum(db_type)
    if match is None:
        return []
    body = match.group(2).strip()
    if len(body) < 2 or not (body.startswith("'") and body.endswith("'")):
        return []
    inner = body[1:-1]
    if not inner:
        return []
    return inner.split("','")


def parse_enum_name(db_type: str) -> str:
    """Return the name in ``enum.name('a','b')``, or an empty string."""
    match = _match_enum(db_type)
    if match is None or match.group(1) is None:
        return ""
    return match.group(1)