from __future__ import annotations

from typing import Optional


class DesktopParseError(Exception):
    """Base class for everything the desktop entry parsers raise."""


class InvalidEncodingError(DesktopParseError):
    """
    Raw value bytes are not acceptable text for the declared kind.

    `offset` is the byte offset of the first offending sequence, when known.
    """

    def __init__(self, kind: object, offset: Optional[int], reason: str = "invalid UTF-8") -> None:
        self.kind = kind
        self.offset = offset
        self.reason = reason
        kind_name = getattr(kind, "value", str(kind))
        where = f" at byte {offset}" if offset is not None else ""
        super().__init__(f"{kind_name} value: {reason}{where}")


class InvalidBooleanError(DesktopParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"expected 'true' or 'false', got {text!r}")


class InvalidNumericError(DesktopParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"expected a number, got {text!r}")


class MissingDelimiterError(DesktopParseError):
    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__("No delimiter found in line")


class KeysWithoutGroupError(DesktopParseError):
    def __init__(self, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        where = f" (line {line_no})" if line_no is not None else ""
        super().__init__(f"File contains keys without section header{where}")
