from __future__ import annotations

from typing import Callable, Dict, Tuple, Union

from xdgparse.parsers.common import has_list_delimiter, split_key, split_list
from xdgparse.parsers.errors import (
    InvalidBooleanError,
    InvalidNumericError,
    MissingDelimiterError,
)
from xdgparse.parsers.strings import decode
from xdgparse.parsers.types import (
    BooleanValue,
    DesktopValue,
    ListValue,
    NumericValue,
    ScalarValue,
    TypedStringValue,
    ValueKind,
)

ItemParser = Callable[[str], ScalarValue]


def parse_bool(text: str) -> BooleanValue:
    if text == "true":
        return BooleanValue(True)
    if text == "false":
        return BooleanValue(False)
    raise InvalidBooleanError(text)


def parse_numeric(text: str) -> NumericValue:
    # float() is more lenient than a desktop file should be
    if not text or text != text.strip() or "_" in text:
        raise InvalidNumericError(text)
    try:
        value = float(text)
    except ValueError as e:
        raise InvalidNumericError(text) from e
    return NumericValue(value)


def _string_parser(kind: ValueKind) -> ItemParser:
    def _parse(text: str) -> TypedStringValue:
        return TypedStringValue(kind=kind, raw=text.encode("utf-8"), text=text)

    return _parse


_ITEM_PARSERS: Dict[ValueKind, ItemParser] = {
    ValueKind.STRING: _string_parser(ValueKind.STRING),
    ValueKind.LOCALE_STRING: _string_parser(ValueKind.LOCALE_STRING),
    ValueKind.ICON_STRING: _string_parser(ValueKind.ICON_STRING),
    ValueKind.BOOLEAN: parse_bool,
    ValueKind.NUMERIC: parse_numeric,
}

# Tried in order when a key is not in KEY_KINDS; string never fails.
_GUESS_ORDER = (ValueKind.BOOLEAN, ValueKind.NUMERIC, ValueKind.STRING)


# (kind, is_list) for the keys the Desktop Entry spec defines
KEY_KINDS: Dict[str, Tuple[ValueKind, bool]] = {
    "Type": (ValueKind.STRING, False),
    "Version": (ValueKind.STRING, False),
    "Exec": (ValueKind.STRING, False),
    "TryExec": (ValueKind.STRING, False),
    "Path": (ValueKind.STRING, False),
    "StartupWMClass": (ValueKind.STRING, False),
    "URL": (ValueKind.STRING, False),
    "Name": (ValueKind.LOCALE_STRING, False),
    "GenericName": (ValueKind.LOCALE_STRING, False),
    "Comment": (ValueKind.LOCALE_STRING, False),
    "Icon": (ValueKind.ICON_STRING, False),
    "NoDisplay": (ValueKind.BOOLEAN, False),
    "Hidden": (ValueKind.BOOLEAN, False),
    "Terminal": (ValueKind.BOOLEAN, False),
    "StartupNotify": (ValueKind.BOOLEAN, False),
    "PrefersNonDefaultGPU": (ValueKind.BOOLEAN, False),
    "DBusActivatable": (ValueKind.BOOLEAN, False),
    "SingleMainWindow": (ValueKind.BOOLEAN, False),
    "Keywords": (ValueKind.LOCALE_STRING, True),
    "OnlyShowIn": (ValueKind.STRING, True),
    "NotShowIn": (ValueKind.STRING, True),
    "Actions": (ValueKind.STRING, True),
    "MimeType": (ValueKind.STRING, True),
    "Categories": (ValueKind.STRING, True),
    "Implements": (ValueKind.STRING, True),
}


def _parse_plural(text: str, kind: ValueKind) -> ListValue:
    parse = _ITEM_PARSERS[kind]
    return ListValue(kind=kind, items=tuple(parse(item) for item in split_list(text)))


def _guess_kind(first: str) -> ValueKind:
    for kind in _GUESS_ORDER:
        try:
            _ITEM_PARSERS[kind](first)
        except (InvalidBooleanError, InvalidNumericError):
            continue
        return kind
    return ValueKind.STRING


def try_types(text: str) -> DesktopValue:
    """
    Guess the type of a value for a key we don't know about.

    The first item decides (boolean, then numeric, then string) and every
    other item has to parse as the same type.
    """
    items = split_list(text)
    kind = _guess_kind(items[0] if items else "")
    if not has_list_delimiter(text):
        return _ITEM_PARSERS[kind](text)
    return _parse_plural(text, kind)


def parse_value(key: str, raw: bytes, *, strict_ascii: bool = False) -> DesktopValue:
    """
    Decode and coerce the raw bytes of `key` according to its declared type.

    The bytes are decoded once, before any list splitting. Unknown keys
    are decoded as UTF-8 text and their type is guessed.
    """
    base, _locale = split_key(key)
    kind, is_list = KEY_KINDS.get(base, (None, False))

    if kind is None:
        # X- keys may hold localized text
        text = decode(raw, ValueKind.LOCALE_STRING)
        return try_types(text)

    decode_kind = kind if kind.is_string else ValueKind.STRING
    text = decode(raw, decode_kind, strict_ascii=strict_ascii)

    if is_list:
        return _parse_plural(text, kind)
    if kind.is_string:
        return TypedStringValue(kind=kind, raw=bytes(raw), text=text)
    return _ITEM_PARSERS[kind](text)


def split_kv(line: Union[bytes, str]) -> Tuple[bytes, bytes]:
    """Split a line on the first `=`, ignoring spaces around it."""
    data = line.encode("utf-8") if isinstance(line, str) else bytes(line)
    key, sep, value = data.partition(b"=")
    if not sep:
        raise MissingDelimiterError(data.decode("utf-8", errors="replace"))
    return key.strip(b" \t"), value.lstrip(b" \t")


def parse_kv(line: Union[bytes, str], *, strict_ascii: bool = False) -> Tuple[str, DesktopValue]:
    raw_key, raw_value = split_kv(line)
    key = decode(raw_key, ValueKind.STRING, strict_ascii=strict_ascii)
    return key, parse_value(key, raw_value, strict_ascii=strict_ascii)
