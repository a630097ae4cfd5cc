from __future__ import annotations

from typing import Any

DEFAULT_MAX_LENGTH = 500
ELLIPSIS = "..."


def is_null(value: object, /) -> bool:
    return value is None


def is_numeric(text: str, /) -> bool:
    """True for a non-empty string made only of ASCII digits."""
    return isinstance(text, str) and text.isascii() and text.isdigit()


def truncate_strings(obj: Any, max_length: int = DEFAULT_MAX_LENGTH) -> Any:
    """
    Shorten long strings inside nested dicts and lists, in place.

    Strings longer than `max_length` become their first `max_length`
    characters followed by "...". Returns `obj` for chaining; anything that is
    not a dict or list is returned untouched.
    """
    if max_length < 0:
        raise ValueError("max_length must be >= 0")
    if isinstance(obj, dict):
        keys = list(obj.keys())
    elif isinstance(obj, list):
        keys = list(range(len(obj)))
    else:
        return obj

    for key in keys:
        value = obj[key]
        if isinstance(value, str):
            if len(value) > max_length:
                obj[key] = value[:max_length] + ELLIPSIS
        elif isinstance(value, (dict, list)):
            truncate_strings(value, max_length)
    return obj
