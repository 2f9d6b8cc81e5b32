import os

import pytest


# Environment variables read by esbuilders settings
_ENV_VARS_TO_ISOLATE = [
    "ESBUILDERS_LOG_LEVEL",
    "ESBUILDERS_LOG_JSON",
    "ESBUILDERS_STRICT_ENUMS",
    "ESBUILDERS_JSON_INDENT",
]


@pytest.fixture(autouse=True)
def env_isolation():
    """Isolate environment variables between tests."""
    backup = {k: os.environ.get(k) for k in _ENV_VARS_TO_ISOLATE}
    for k in _ENV_VARS_TO_ISOLATE:
        os.environ.pop(k, None)
    try:
        yield
    finally:
        for k, v in backup.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v


@pytest.fixture(autouse=True)
def settings_isolation(env_isolation):
    """Drop cached settings so each test sees its own environment."""
    from esbuilders.core.config import reset_settings

    reset_settings()
    try:
        yield
    finally:
        reset_settings()


@pytest.fixture
def strict_enums(monkeypatch):
    """Enable strict enum validation for one test."""
    from esbuilders.core.config import reset_settings

    monkeypatch.setenv("ESBUILDERS_STRICT_ENUMS", "1")
    reset_settings()
    yield
