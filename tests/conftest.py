import logging
import os

import pytest

from core.services.header_formatter import format_license_as_comment


LICENSE_TEXT = "Copyright 2025 Karesis\n\nLicensed under the Apache License, Version 2.0\n"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user/project .env files and LICE_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("LICE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def license_file(tmp_path):
    path = tmp_path / "HEADER.txt"
    path.write_text(LICENSE_TEXT, encoding="utf-8", newline="")
    return path


@pytest.fixture
def golden_header():
    return format_license_as_comment(LICENSE_TEXT)



@pytest.fixture(autouse=True)
def reset_lice_logger():
    """configure_logging() mutates the shared `lice` logger; undo it."""
    logger = logging.getLogger("lice")
    level = logger.level
    yield
    logger.handlers.clear()
    logger.setLevel(level)
