"""Name canonicalization for rated items."""

from __future__ import annotations

import string

UNTITLED = "untitled"

ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + " -_.,")


def sanitize_name(name: str) -> str:
    """Map a user-entered name to its filesystem-safe item id.

    Surrounding whitespace is trimmed; every remaining character outside ASCII
    letters, digits, space, `-`, `_`, `.` and `,` becomes a single `-`. Blank
    input yields `"untitled"`.

    Args:
        name (str): Raw name as typed by the user.

    Returns:
        str: Canonical id, never empty.
    """

    trimmed = name.strip()
    if not trimmed:
        return UNTITLED
    sanitized = "".join(char if char in ALLOWED_CHARACTERS else "-" for char in trimmed)
    return sanitized or UNTITLED
