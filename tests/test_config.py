# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipe_scanner` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import logging

import pytest
from pydantic import ValidationError

from recipe_scanner.config import Settings


def test_log_level_is_upper_cased():
    assert Settings(log_level="debug").log_level == "DEBUG"
    assert Settings(log_level=" Warning ").log_level == "WARNING"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("RECIPE_SCANNER_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    # the value must be usable by logging as-is
    assert logging.getLevelName(settings.log_level) == logging.DEBUG


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("RECIPE_SCANNER_SEED_ON_STARTUP", "false")
    monkeypatch.setenv("RECIPE_SCANNER_MAX_PAGE_SIZE", "7")
    settings = Settings()
    assert settings.seed_on_startup is False
    assert settings.max_page_size == 7
