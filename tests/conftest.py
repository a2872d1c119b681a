"""Pytest fixtures shared by the arrowpipe tests."""

import os
from unittest.mock import patch

import pytest

from arrowpipe.config import ENV_MAX_DEPTH, ENV_TRACE, reset_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test with default settings and an untouched environment.

    Home and working directory point at empty temporary folders so no real
    ``.env`` file is picked up.
    """
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    with patch.dict(os.environ):
        os.environ.pop(ENV_TRACE, None)
        os.environ.pop(ENV_MAX_DEPTH, None)
        reset_config()
        yield
    reset_config()
