"""Shared fixtures: isolated settings and logging for every test."""

import logging

import pytest

from config import reset_settings
from geodesy import Datum

SETTINGS_ENV = (
    "DEFAULT_DATUM",
    "LATLON_DECIMALS",
    "UTM_DECIMALS",
    "DMS_SECONDS_DECIMALS",
    "CROSS_CHECK_TOLERANCE_M",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each test away from any .env file and with default settings."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, "_utmconv_handler", False)]:
        root.removeHandler(handler)
        handler.close()


@pytest.fixture(params=list(Datum), ids=lambda d: d.value)
def datum(request):
    return request.param
