"""Tests for desktop file parsing.

Tests cover group handling, comments, per-line issues and locale lookup.
"""

import logging

import pytest

from xdgparse.parsers import (
    DESKTOP_ENTRY_GROUP,
    BooleanValue,
    DesktopParseError,
    KeysWithoutGroupError,
    ListValue,
    NumericValue,
    ValueKind,
    load_desktop_entry,
    parse_desktop_entry,
)

SAMPLE_FILES = ["Alacritty.desktop", "htop.desktop", "org.pwmt.zathura.desktop"]


class TestSampleFiles:
    """Test real-world desktop files."""

    @pytest.mark.parametrize("name", SAMPLE_FILES)
    def test_parses_without_issues(self, data_dir, name: str) -> None:
        entry = load_desktop_entry(data_dir / name)
        assert entry.ok, entry.issues
        assert DESKTOP_ENTRY_GROUP in entry.groups
        assert entry.source == str(data_dir / name)

    def test_htop_values(self, data_dir) -> None:
        entry = load_desktop_entry(data_dir / "htop.desktop")
        assert entry.get("Terminal") == BooleanValue(True)
        assert entry.get("Icon").kind == ValueKind.ICON_STRING
        assert entry.get("GenericName[ru]").text == "Просмотр процессов"
        categories = entry.get("Categories")
        assert isinstance(categories, ListValue)
        assert [c.text for c in categories] == ["ConsoleOnly", "System"]

    def test_alacritty_action_group(self, data_dir) -> None:
        entry = load_desktop_entry(data_dir / "Alacritty.desktop")
        assert entry.group_names() == ["Desktop Entry", "Desktop Action New"]
        assert entry.get("Name", "Desktop Action New").text == "New Terminal"

    def test_zathura_extension_keys(self, data_dir) -> None:
        entry = load_desktop_entry(data_dir / "org.pwmt.zathura.desktop")
        assert entry.get("X-Zathura-Rank") == NumericValue(2.5)
        plugins = entry.get("X-Zathura-Plugins")
        assert [p.text for p in plugins] == ["pdf", "ps", "djvu"]


class TestParseStructure:
    """Test groups, comments and blank lines."""

    def test_comments_and_blank_lines_skipped(self) -> None:
        entry = parse_desktop_entry("# top\n\n[Desktop Entry]\n  # indented\nName=A\n")
        assert entry.keys() == ["Name"]

    def test_indented_key(self) -> None:
        """Test leading whitespace before a key is not part of the key."""
        entry = parse_desktop_entry("[Desktop Entry]\n  Name=A\n\tIcon = b\n")
        assert entry.keys() == ["Name", "Icon"]
        assert entry.get("Name").text == "A"

    def test_hash_inside_value_is_kept(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\nComment=C# editor\n")
        assert entry.get("Comment").text == "C# editor"

    def test_crlf_line_endings(self) -> None:
        entry = parse_desktop_entry(b"[Desktop Entry]\r\nName=A\r\n")
        assert entry.get("Name").text == "A"

    def test_empty_group_kept(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\nName=A\n[Empty]\n")
        assert entry.group_names() == ["Desktop Entry", "Empty"]
        assert entry.keys("Empty") == []

    def test_repeated_group_merges(self) -> None:
        entry = parse_desktop_entry("[G]\nA=1\n[H]\nB=2\n[G]\nC=3\n")
        assert entry.keys("G") == ["A", "C"]

    def test_duplicate_key_last_wins(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\nName=A\nName=B\n")
        assert entry.get("Name").text == "B"

    def test_keys_without_group(self) -> None:
        with pytest.raises(KeysWithoutGroupError) as exc_info:
            parse_desktop_entry("Name=A\n[Desktop Entry]\n")
        assert exc_info.value.line_no == 1

    def test_only_comments(self) -> None:
        entry = parse_desktop_entry("# nothing here\n")
        assert entry.groups == {}
        assert entry.ok

    def test_bad_group_header_encoding(self) -> None:
        with pytest.raises(DesktopParseError, match="group header"):
            parse_desktop_entry(b"[Desk\xfftop Entry]\n")


class TestIssues:
    """Test per-line failures are collected, not raised."""

    def test_invalid_utf8_value(self) -> None:
        entry = parse_desktop_entry(b"[Desktop Entry]\nName=Ok\nComment=\xff\xfe\nIcon=x\n")
        assert not entry.ok
        assert len(entry.issues) == 1
        issue = entry.issues[0]
        assert issue.line == 3
        assert issue.group == "Desktop Entry"
        assert issue.key == "Comment"
        assert "invalid UTF-8" in issue.message
        # the rest of the file is still parsed
        assert entry.keys() == ["Name", "Icon"]

    def test_missing_delimiter(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\nnot a key value line\n")
        assert entry.issues[0].key is None
        assert "No delimiter" in entry.issues[0].message

    def test_bad_boolean(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\nTerminal=yes\n")
        assert entry.issues[0].key == "Terminal"

    def test_strict_ascii_issue(self) -> None:
        data = "[Desktop Entry]\nExec=café\nName=café\n".encode("utf-8")
        assert parse_desktop_entry(data).ok
        entry = parse_desktop_entry(data, strict_ascii=True)
        assert [i.key for i in entry.issues] == ["Exec"]
        assert entry.get("Name").text == "café"

    def test_issue_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="xdgparse"):
            parse_desktop_entry(b"[Desktop Entry]\nComment=\xff\n", source="bad.desktop")
        assert "bad.desktop:2" in caplog.text


class TestLocaleLookup:
    """Test DesktopEntry.get with a locale."""

    DATA = (
        "[Desktop Entry]\n"
        "Name=Viewer\n"
        "Name[de]=Betrachter\n"
        "Name[sr@Latn]=Pregledač\n"
        "Name[pt_BR]=Visualizador\n"
    )

    def test_exact_locale(self) -> None:
        entry = parse_desktop_entry(self.DATA)
        assert entry.get("Name", locale="pt_BR").text == "Visualizador"

    def test_language_fallback(self) -> None:
        entry = parse_desktop_entry(self.DATA)
        assert entry.get("Name", locale="de_AT.UTF-8").text == "Betrachter"

    def test_modifier_fallback(self) -> None:
        entry = parse_desktop_entry(self.DATA)
        assert entry.get("Name", locale="sr_RS@Latn").text == "Pregledač"

    def test_modifier_after_encoding(self) -> None:
        entry = parse_desktop_entry("[Desktop Entry]\nName=Plain\nName[de@euro]=Euro\n")
        assert entry.get("Name", locale="de_DE.UTF-8@euro").text == "Euro"

    def test_group_is_second_argument(self) -> None:
        """Test get(key, group) argument order."""
        entry = parse_desktop_entry(self.DATA)
        assert entry.get("Name", "Desktop Entry").text == "Viewer"
        assert entry.get("Desktop Entry", "Name") is None

    def test_unlocalized_fallback(self) -> None:
        entry = parse_desktop_entry(self.DATA)
        assert entry.get("Name", locale="ja").text == "Viewer"

    def test_missing_group_and_key(self) -> None:
        entry = parse_desktop_entry(self.DATA)
        assert entry.get("Name", "Nope") is None
        assert entry.get("Exec") is None
