from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class ValueKind(str, Enum):
    STRING = "string"
    LOCALE_STRING = "localestring"
    ICON_STRING = "iconstring"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"

    @property
    def is_string(self) -> bool:
        return self in STRING_KINDS


STRING_KINDS = frozenset(
    {ValueKind.STRING, ValueKind.LOCALE_STRING, ValueKind.ICON_STRING}
)


@dataclass(frozen=True)
class TypedStringValue:
    """Decoded text for a string, localestring or iconstring key."""
    kind: ValueKind
    raw: bytes
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class BooleanValue:
    value: bool
    kind: ValueKind = ValueKind.BOOLEAN

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class NumericValue:
    value: float
    kind: ValueKind = ValueKind.NUMERIC

    def __str__(self) -> str:
        # 1.0 -> "1", keep fractional values as-is
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


ScalarValue = Union[TypedStringValue, BooleanValue, NumericValue]


@dataclass(frozen=True)
class ListValue:
    """
    A `;`-separated value. `kind` is the kind shared by every item.
    Rendered back with a `;` after each item, as desktop files write lists.
    """
    kind: ValueKind
    items: Tuple[ScalarValue, ...] = ()

    def __str__(self) -> str:
        return "".join(f"{item};" for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


DesktopValue = Union[TypedStringValue, BooleanValue, NumericValue, ListValue]
