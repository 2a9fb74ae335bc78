from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    ISSUES = 1
    ERROR = 2
