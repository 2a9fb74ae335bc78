"""Pytest configuration and fixtures for xdgparse tests."""

import logging
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Let caplog see xdgparse records even after the CLI set propagate=False."""
    logger = logging.getLogger("xdgparse")
    original = logger.propagate
    logger.propagate = True

    yield

    logger.propagate = original


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point HOME and the working directory at an empty tmp dir."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return work
