"""
Root-level shared test fixtures.

Keeps the developer's own Bitwarden environment out of the tests.
"""

from __future__ import annotations

import pytest

from bitward.config import reset_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove env vars that change how bitward talks to `bw`."""
    for key in [
        "BW_CLIENTID",
        "BW_CLIENTSECRET",
        "BW_PASSWORD",
        "BW_SESSION",
        "BITWARD_BW_PATH",
        "BITWARD_SYNC_ON_OPEN",
    ]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
