# tests/conftest.py
import pytest


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch):
    """rich reads these at Console() time; keep the tests independent of the host terminal."""
    for var in ("NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "COLUMNS"):
        monkeypatch.delenv(var, raising=False)
