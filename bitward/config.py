"""
Configuration for the Bitwarden CLI adapter.

Credential detection is driven by an explicit ``BitwardenConfig``. The env
loader below is a convenience that mirrors what ``bw`` itself reads.

Usage:
    from bitward.config import get_config
    cfg = get_config()
    print(cfg.executable)    # "bw" or $BITWARD_BW_PATH
    print(cfg.has_api_key)   # True when BW_CLIENTID and BW_CLIENTSECRET are set
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Names `bw` reads for API-key login and `--passwordenv`.
CLIENT_ID_ENV = "BW_CLIENTID"
CLIENT_SECRET_ENV = "BW_CLIENTSECRET"
PASSWORD_ENV = "BW_PASSWORD"

_FALSEY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BitwardenConfig:
    """How to reach `bw` and which non-interactive credentials are available."""

    executable: str = "bw"
    client_id: str | None = None
    client_secret: str | None = None
    password_env: str | None = None  # name of the variable holding the master password
    sync_on_open: bool = True

    @property
    def has_api_key(self) -> bool:
        # Presence matters, not value: an empty string still counts.
        return self.client_id is not None and self.client_secret is not None

    def child_env(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Environment for a `bw` child, with API-key credentials exported."""
        env = dict(os.environ if base is None else base)
        if self.client_id is not None:
            env[CLIENT_ID_ENV] = self.client_id
        if self.client_secret is not None:
            env[CLIENT_SECRET_ENV] = self.client_secret
        return env


# Singleton
_config: BitwardenConfig | None = None


def get_config() -> BitwardenConfig:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _load_from_env() -> BitwardenConfig:
    """Load configuration from environment variables."""
    return BitwardenConfig(
        executable=os.environ.get("BITWARD_BW_PATH", "bw"),
        client_id=os.environ.get(CLIENT_ID_ENV),
        client_secret=os.environ.get(CLIENT_SECRET_ENV),
        password_env=PASSWORD_ENV if PASSWORD_ENV in os.environ else None,
        sync_on_open=os.environ.get("BITWARD_SYNC_ON_OPEN", "1").strip().lower() not in _FALSEY,
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
