"""Byte sequence rendering (raw or hex) and hex decoding."""

import enum
import string
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


class ByteFormat(enum.Enum):
    """How each input byte is rendered."""
    RAW = 'raw'
    HEX = 'hex'


# Output characters per input byte
ELEMENT_SIZE = {
    ByteFormat.RAW: 1,
    ByteFormat.HEX: 2,
}


def _byte_format(result_format, func: str) -> ByteFormat:
    try:
        return ByteFormat(result_format)
    except ValueError:
        raise ValueError(f"unsupported result format {result_format!r} for {func}") from None


def _as_bytes(data: BytesLike, func: str) -> bytes:
    if isinstance(data, str):
        # Single-byte characters only; anything above 0xff raises UnicodeEncodeError
        return data.encode('latin-1')
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise ValueError(f"invalid input for {func}")
    return bytes(data)


def encoded_length(size: int, result_format, delimiter: str = '') -> int:
    """Length of the text produced for `size` input bytes."""
    fmt = _byte_format(result_format, 'encoded_length')
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size == 0:
        return 0
    return size * ELEMENT_SIZE[fmt] + (size - 1) * len(delimiter)


def to_string(data: BytesLike, result_format, delimiter: str = '') -> str:
    """
    Render `data` as text.

    RAW copies every byte verbatim (as the character with the same code
    point), HEX writes each byte as two lowercase hex digits. A non-empty
    `delimiter` is placed between adjacent elements, never before the first
    or after the last one.
    """
    if delimiter is None:
        raise ValueError("invalid delimiter for to_string")
    fmt = _byte_format(result_format, 'to_string')

    raw = _as_bytes(data, 'to_string')
    if not raw:
        return ''

    if fmt is ByteFormat.RAW:
        text = raw.decode('latin-1')
        if not delimiter:
            return text
        elements = text
    elif not delimiter:
        return raw.hex()
    else:
        elements = [f"{b:02x}" for b in raw]

    return delimiter.join(elements)


def byte_to_hex(data: BytesLike) -> str:
    """Convert bytes to lowercase hex string."""
    return to_string(data, ByteFormat.HEX)


def hex_to_byte(hex_str: str, delimiter: str = '') -> bytearray:
    """
    Convert hex string to byte array.

    Groups of two hex digits must be separated by exactly `delimiter`, which
    may itself consist of hex digits.
    """
    if not hex_str:
        return bytearray()
    step = 2 + len(delimiter)
    if (len(hex_str) + len(delimiter)) % step != 0:
        raise ValueError("uneven hex length")
    result = bytearray()
    for offset in range(0, len(hex_str), step):
        group = hex_str[offset:offset + 2]
        if not all(c in string.hexdigits for c in group):
            raise ValueError(f"non-hex group {group!r} at offset {offset}")
        separator = hex_str[offset + 2:offset + step]
        if separator and separator != delimiter:
            raise ValueError(f"expected delimiter {delimiter!r} at offset {offset + 2}, got {separator!r}")
        result.append(int(group, 16))
    return result
