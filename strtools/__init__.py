"""String and time formatting helpers."""

from . import timefmt
from .hex_encoding import ByteFormat, byte_to_hex, encoded_length, hex_to_byte, to_string
from .transform import (
    Trim,
    eliminate_duplicates,
    is_lowercased,
    is_uppercased,
    lowercase,
    sparsed_string,
    terminated,
    to_lowercase,
    to_uppercase,
    trimmed,
    uppercase,
)

__all__ = [
    "ByteFormat",
    "Trim",
    "byte_to_hex",
    "eliminate_duplicates",
    "encoded_length",
    "hex_to_byte",
    "is_lowercased",
    "is_uppercased",
    "lowercase",
    "sparsed_string",
    "terminated",
    "timefmt",
    "to_lowercase",
    "to_string",
    "to_uppercase",
    "trimmed",
    "uppercase",
]
