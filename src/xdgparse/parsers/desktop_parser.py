from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from xdgparse.parsers.common import locale_candidates, split_key
from xdgparse.parsers.errors import DesktopParseError, KeysWithoutGroupError
from xdgparse.parsers.strings import decode
from xdgparse.parsers.types import DesktopValue, ValueKind
from xdgparse.parsers.values import parse_kv

logger = logging.getLogger(__name__)

DESKTOP_ENTRY_GROUP = "Desktop Entry"

DesktopGroup = Dict[str, DesktopValue]


@dataclass(frozen=True)
class EntryIssue:
    """A line that could not be parsed. The rest of the file still is."""
    line: int
    group: Optional[str]
    key: Optional[str]
    message: str


@dataclass
class DesktopEntry:
    groups: Dict[str, DesktopGroup] = field(default_factory=dict)
    issues: List[EntryIssue] = field(default_factory=list)
    source: Optional[str] = None

    def group_names(self) -> List[str]:
        return list(self.groups)

    def keys(self, group: str = DESKTOP_ENTRY_GROUP) -> List[str]:
        return list(self.groups.get(group, {}))

    def get(
        self,
        key: str,
        group: str = DESKTOP_ENTRY_GROUP,
        *,
        locale: Optional[str] = None,
        default: Optional[DesktopValue] = None,
    ) -> Optional[DesktopValue]:
        """
        Look up `key` in `group`, trying localized variants first when a
        locale is given ("de_DE@euro" tries de_DE@euro, de_DE, de@euro, de,
        then the plain key).
        """
        entries = self.groups.get(group)
        if entries is None:
            return default

        base, _ = split_key(key)
        if locale:
            for loc in locale_candidates(locale):
                localized = f"{base}[{loc}]"
                if localized in entries:
                    return entries[localized]
        return entries.get(key, default)

    @property
    def ok(self) -> bool:
        return not self.issues


def _decode_header(line: bytes, line_no: int) -> Optional[str]:
    if not (line.startswith(b"[") and line.endswith(b"]")):
        return None
    try:
        return decode(line[1:-1], ValueKind.STRING).strip()
    except DesktopParseError as e:
        raise DesktopParseError(f"line {line_no}: group header: {e}") from e


def parse_desktop_entry(
    data: Union[bytes, str],
    *,
    strict_ascii: bool = False,
    source: Optional[str] = None,
) -> DesktopEntry:
    """
    Parse the contents of a .desktop file.

    Supported:
      [Group Name] headers
      Key=Value and Key[locale]=Value lines (spaces around `=` ignored)
      comments (# ...) and blank lines

    A bad value is recorded in `DesktopEntry.issues` and parsing goes on.
    Keys before the first group header raise KeysWithoutGroupError.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    out = DesktopEntry(source=source)
    current: Optional[DesktopGroup] = None
    current_name: Optional[str] = None

    for idx, raw in enumerate(data.split(b"\n"), start=1):
        line = raw.rstrip(b"\r")
        stripped = line.strip()
        if not stripped or stripped.startswith(b"#"):
            continue

        header = _decode_header(stripped, idx)
        if header is not None:
            current_name = header
            if header in out.groups:
                logger.debug("line %d: group [%s] repeated, merging", idx, header)
            current = out.groups.setdefault(header, {})
            continue

        if current is None:
            raise KeysWithoutGroupError(idx)

        try:
            key, value = parse_kv(line, strict_ascii=strict_ascii)
        except DesktopParseError as e:
            key_hint = line.partition(b"=")[0].strip().decode("utf-8", errors="replace")
            issue = EntryIssue(
                line=idx,
                group=current_name,
                key=key_hint if b"=" in line else None,
                message=str(e),
            )
            logger.debug("%s:%d: %s", source or "<data>", idx, issue.message)
            out.issues.append(issue)
            continue

        if key in current:
            logger.debug("line %d: duplicate key %s in [%s]", idx, key, current_name)
        current[key] = value

    return out


def load_desktop_entry(path: Union[str, Path], *, strict_ascii: bool = False) -> DesktopEntry:
    p = Path(path)
    return parse_desktop_entry(p.read_bytes(), strict_ascii=strict_ascii, source=str(p))
