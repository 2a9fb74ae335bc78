"""Tests for layered configuration loading."""

import pytest
from pydantic import ValidationError

from xdgparse.core.config import find_project_config, load_config
from xdgparse.core.models import ParserConfig, UIConfig


def _write(path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestDefaults:
    """Test defaults when no config file exists."""

    def test_no_config_files(self, isolated_config) -> None:
        loaded = load_config(isolated_config)
        assert loaded.parser == ParserConfig()
        assert loaded.parser.strict_ascii is False
        assert loaded.ui == UIConfig()
        assert loaded.global_path is None
        assert loaded.project_path is None


class TestPrecedence:
    """Test global -> project -> CLI precedence."""

    def test_global_config(self, isolated_config, tmp_path) -> None:
        _write(tmp_path / "home" / ".config" / "xdgparse" / "config.toml", "[parser]\nstrict_ascii = true\n")
        loaded = load_config(isolated_config)
        assert loaded.parser.strict_ascii is True
        assert loaded.global_path is not None

    def test_project_overrides_global(self, isolated_config, tmp_path) -> None:
        _write(tmp_path / "home" / ".config" / "xdgparse" / "config.toml", "[parser]\nstrict_ascii = true\n[ui]\nshow_raw = true\n")
        _write(isolated_config / ".xdgparse" / "config.toml", "[parser]\nstrict_ascii = false\n")
        loaded = load_config(isolated_config)
        assert loaded.parser.strict_ascii is False
        # untouched keys still come from the global file
        assert loaded.ui.show_raw is True

    def test_cli_overrides_project(self, isolated_config) -> None:
        _write(isolated_config / ".xdgparse" / "config.toml", "[parser]\nstrict_ascii = false\n")
        loaded = load_config(isolated_config, cli_overrides={"parser": {"strict_ascii": True}})
        assert loaded.parser.strict_ascii is True

    def test_project_config_found_in_parent(self, isolated_config) -> None:
        _write(isolated_config / ".xdgparse" / "config.toml", "[ui]\nmax_value_width = 40\n")
        nested = isolated_config / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_config(nested) == (isolated_config / ".xdgparse" / "config.toml").resolve()
        assert load_config(nested).ui.max_value_width == 40


class TestValidation:
    """Test invalid config values."""

    def test_non_table_section_ignored(self, isolated_config, caplog) -> None:
        _write(isolated_config / ".xdgparse" / "config.toml", 'parser = "strict"\n')
        loaded = load_config(isolated_config)
        assert loaded.parser == ParserConfig()
        assert "ignoring [parser]" in caplog.text

    def test_out_of_range_value(self, isolated_config) -> None:
        _write(isolated_config / ".xdgparse" / "config.toml", "[ui]\nmax_value_width = 1\n")
        with pytest.raises(ValidationError):
            load_config(isolated_config)
