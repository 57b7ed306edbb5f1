"""Character rules for directive value tokens.

A value token may contain HTAB and printable ASCII except ``,`` (0x2C)
and ``;`` (0x3B). The comma separates policies inside one header field and
the semicolon separates directives, so neither can appear in a token.
"""

from __future__ import annotations

# ASCII whitespace as defined by the Infra standard; separates tokens.
ASCII_WHITESPACE = "\t\n\f\r "

# Inclusive code point ranges accepted inside a value token.
_VALUE_RANGES: tuple[tuple[int, int], ...] = (
    (0x09, 0x09),
    (0x20, 0x2B),
    (0x2D, 0x3A),
    (0x3C, 0x7E),
)


def is_valid_value_char(ch: str) -> bool:
    """Return True if the single character ``ch`` may appear in a value token."""
    cp = ord(ch)
    for low, high in _VALUE_RANGES:
        if low <= cp <= high:
            return True
    return False


def is_valid_value(token: str) -> bool:
    """Return True if every character of ``token`` is a valid value character."""
    return all(is_valid_value_char(ch) for ch in token)
