from __future__ import annotations

from xdgparse.parsers.desktop_parser import (
    DESKTOP_ENTRY_GROUP,
    DesktopEntry,
    EntryIssue,
    load_desktop_entry,
    parse_desktop_entry,
)
from xdgparse.parsers.errors import (
    DesktopParseError,
    InvalidBooleanError,
    InvalidEncodingError,
    InvalidNumericError,
    KeysWithoutGroupError,
    MissingDelimiterError,
)
from xdgparse.parsers.strings import decode, decode_value
from xdgparse.parsers.types import (
    BooleanValue,
    DesktopValue,
    ListValue,
    NumericValue,
    TypedStringValue,
    ValueKind,
)
from xdgparse.parsers.values import KEY_KINDS, parse_kv, parse_value

__all__ = [
    "DESKTOP_ENTRY_GROUP",
    "KEY_KINDS",
    "BooleanValue",
    "DesktopEntry",
    "DesktopParseError",
    "DesktopValue",
    "EntryIssue",
    "InvalidBooleanError",
    "InvalidEncodingError",
    "InvalidNumericError",
    "KeysWithoutGroupError",
    "ListValue",
    "MissingDelimiterError",
    "NumericValue",
    "TypedStringValue",
    "ValueKind",
    "decode",
    "decode_value",
    "load_desktop_entry",
    "parse_desktop_entry",
    "parse_kv",
    "parse_value",
]
