from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from xdgparse.core.models import CheckError, CheckIssue, CheckResult, CheckStats, ParserConfig
from xdgparse.parsers import DesktopEntry, DesktopParseError, load_desktop_entry

logger = logging.getLogger(__name__)

# Injectable for tests; defaults to reading from disk.
EntryLoader = Callable[[Path, bool], DesktopEntry]


def _default_loader(path: Path, strict_ascii: bool) -> DesktopEntry:
    return load_desktop_entry(path, strict_ascii=strict_ascii)


def _sort_issues(issues: List[CheckIssue]) -> List[CheckIssue]:
    # stable order for CI diffs
    return sorted(issues, key=lambda x: (x.file, x.line, x.key or ""))


def run_check(
    *,
    paths: Iterable[Path],
    config: ParserConfig,
    loader: Optional[EntryLoader] = None,
) -> CheckResult:
    """
    Parse every file:
    load -> collect per-line issues -> collect per-file errors -> CheckResult.

    A file that can't be read or parsed at all becomes a CheckError; the
    remaining files are still checked.
    """
    t0 = time.perf_counter()
    load = loader or _default_loader

    path_list = sorted({Path(p) for p in paths}, key=str)
    result = CheckResult(
        started_at=datetime.now(timezone.utc),
        files=[str(p) for p in path_list],
        stats=CheckStats(),
    )
    result.stats.files_considered = len(path_list)

    issues: List[CheckIssue] = []

    for p in path_list:
        try:
            entry = load(p, config.strict_ascii)
        except (OSError, DesktopParseError) as e:
            logger.warning("%s: %s", p, e)
            result.errors.append(
                CheckError(
                    file=str(p),
                    message=f"Failed parsing file: {p}",
                    detail=str(e),
                )
            )
            continue

        result.stats.files_parsed += 1
        result.stats.groups += len(entry.groups)
        result.stats.keys += sum(len(g) for g in entry.groups.values())

        for issue in entry.issues:
            issues.append(
                CheckIssue(
                    file=str(p),
                    line=issue.line,
                    group=issue.group,
                    key=issue.key,
                    message=issue.message,
                )
            )

    result.issues = _sort_issues(issues)
    result.stats.issues = len(result.issues)
    result.stats.duration_ms = int((time.perf_counter() - t0) * 1000)
    result.finished_at = datetime.now(timezone.utc)
    logger.debug(
        "checked %d file(s): %d issue(s), %d error(s)",
        result.stats.files_parsed,
        result.stats.issues,
        len(result.errors),
    )
    return result
