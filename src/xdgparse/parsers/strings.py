from __future__ import annotations

from typing import Union

from xdgparse.parsers.errors import InvalidEncodingError
from xdgparse.parsers.types import ValueKind, TypedStringValue


def _first_non_ascii(raw: bytes) -> int:
    if raw.isascii():
        return -1
    for i, b in enumerate(raw):
        if b > 0x7F:
            return i
    return -1


def decode(
    raw: Union[bytes, bytearray, memoryview],
    kind: ValueKind,
    *,
    strict_ascii: bool = False,
) -> str:
    """
    Decode the right-hand side of a key/value line for a string-like key.

    All three string kinds share one rule: the bytes must be valid UTF-8.
    `string` values are ASCII-only per the Desktop Entry spec, but that is
    only enforced when `strict_ascii` is set.

    Raises InvalidEncodingError with the byte offset of the first bad
    sequence.
    """
    kind = ValueKind(kind)
    if not kind.is_string:
        raise ValueError(f"not a string kind: {kind.value}")

    data = bytes(raw)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(kind, e.start, "invalid UTF-8") from e

    if strict_ascii and kind == ValueKind.STRING:
        pos = _first_non_ascii(data)
        if pos >= 0:
            raise InvalidEncodingError(kind, pos, "non-ASCII byte in string value")

    return text


def decode_value(
    raw: Union[bytes, bytearray, memoryview],
    kind: ValueKind,
    *,
    strict_ascii: bool = False,
) -> TypedStringValue:
    data = bytes(raw)
    text = decode(data, kind, strict_ascii=strict_ascii)
    return TypedStringValue(kind=ValueKind(kind), raw=data, text=text)
