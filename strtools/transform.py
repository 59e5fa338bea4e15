"""
String transformations.

Character classes are fixed to the ASCII (C locale) tables and do not
depend on the process locale: whitespace is " \\t\\n\\v\\f\\r" and only the
letters A-Z/a-z have a case. Every other character passes through unchanged.
"""

import enum
import string

WHITESPACE = ' \t\n\v\f\r'

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER_BYTES = bytes.maketrans(string.ascii_uppercase.encode(), string.ascii_lowercase.encode())
_TO_UPPER_BYTES = bytes.maketrans(string.ascii_lowercase.encode(), string.ascii_uppercase.encode())
_LOWERCASE = frozenset(string.ascii_lowercase)
_UPPERCASE = frozenset(string.ascii_uppercase)


class Trim(enum.IntFlag):
    """Sides of a string to strip."""
    NONE = 0
    LHS = 0x1
    RHS = 0x2
    ALL = LHS | RHS


def sparsed_string(s: str, delimiter: str) -> str:
    """Return `s` with `delimiter` between the characters."""
    return delimiter.join(s)


def terminated(s: str, c: str) -> str:
    """Return `s` guaranteed to end with the character `c`."""
    if len(c) != 1:
        raise ValueError(f"terminator must be a single character, got {c!r}")
    if not s or s[-1] != c:
        return s + c
    return s


def eliminate_duplicates(s: str) -> str:
    """Drop every repeated character, keeping first occurrences in order."""
    # dicts keep insertion order
    return ''.join(dict.fromkeys(s))


def trimmed(s: str, trim: Trim = Trim.ALL) -> str:
    """Return `s` without whitespace at the sides selected by `trim`."""
    if trim & Trim.LHS:
        s = s.lstrip(WHITESPACE)
    if trim & Trim.RHS:
        s = s.rstrip(WHITESPACE)
    return s


# --- lowercase ---

def lowercase(buf: bytearray) -> None:
    """Replace uppercase letters in `buf` with lowercase ones, in place."""
    buf[:] = buf.translate(_TO_LOWER_BYTES)


def to_lowercase(s: str) -> str:
    """Copy of `s` with uppercase letters replaced by lowercase ones."""
    return s.translate(_TO_LOWER)


def is_lowercased(s: str) -> bool:
    """True if every character of `s` is a lowercase letter."""
    return all(c in _LOWERCASE for c in s)


# --- uppercase ---

def uppercase(buf: bytearray) -> None:
    """Replace lowercase letters in `buf` with uppercase ones, in place."""
    buf[:] = buf.translate(_TO_UPPER_BYTES)


def to_uppercase(s: str) -> str:
    """Copy of `s` with lowercase letters replaced by uppercase ones."""
    return s.translate(_TO_UPPER)


def is_uppercased(s: str) -> bool:
    """True if every character of `s` is an uppercase letter."""
    return all(c in _UPPERCASE for c in s)
