"""Root test configuration: keep host MDHTML_* settings and log levels out of every test"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove MDHTML_<FIELD> environment variables so defaults are deterministic."""
    for name in list(os.environ):
        if name.startswith("MDHTML_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_log_level():
    """CLI commands set the mdhtml logger level; restore it after each test."""
    logger = logging.getLogger("mdhtml")
    level = logger.level
    yield
    logger.setLevel(level)
