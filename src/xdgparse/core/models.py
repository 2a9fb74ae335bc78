from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


# ================================
# Check results
# ================================


class CheckIssue(BaseModel):
    file: str
    line: int
    group: Optional[str] = None
    key: Optional[str] = None
    message: str = ""


class CheckError(BaseModel):
    file: str
    message: str
    detail: Optional[str] = None


class CheckStats(BaseModel):
    files_considered: int = 0
    files_parsed: int = 0
    groups: int = 0
    keys: int = 0
    issues: int = 0
    duration_ms: int = 0


class CheckResult(BaseModel):
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    files: List[str] = Field(default_factory=list)
    issues: List[CheckIssue] = Field(default_factory=list)
    errors: List[CheckError] = Field(default_factory=list)
    stats: CheckStats = Field(default_factory=CheckStats)

    @model_validator(mode="after")
    def _fixup_counts(self) -> "CheckResult":
        self.stats.issues = len(self.issues)
        return self


# ================================
# Parser config (defaults only)
# ================================


class ParserConfig(BaseModel):
    """
    Defaults live here.
    Project/global/CLI overrides are merged by core/config.py (do NOT load config in defaults).
    """

    strict_ascii: bool = Field(
        default=False,
        description="Reject non-ASCII bytes in `string` values instead of accepting any UTF-8.",
    )


# ================================
# UI config (defaults only)
# ================================


class UIConfig(BaseModel):
    """
    Display preferences for `xdgparse show`.
    Project/global/CLI overrides are merged by core/config.py.
    """

    max_value_width: int = Field(default=80, ge=10, le=1000)
    show_raw: bool = Field(
        default=False, description="Show the raw bytes next to decoded string values."
    )
