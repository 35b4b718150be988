"""
bitward — read-only access to a Bitwarden vault through the `bw` CLI.

Public API:
    open_session(config)     → authenticated VaultSession (prompts if locked)
    session.status()         → VaultStatus
    session.sync()           → pull latest vault data
    session.get_item(id)     → Item
    session.get_items(*args) → list[Item], args passed to `bw list items`
"""

from __future__ import annotations

from bitward.config import BitwardenConfig, get_config
from bitward.errors import (
    AuthenticationError,
    BitwardenError,
    CommandError,
    DecodeError,
    UnknownVaultStatusError,
)
from bitward.models import CustomField, Item, ItemType, Login, LoginUri, VaultState, VaultStatus
from bitward.session import VaultSession

__version__ = "0.1.0"

open_session = VaultSession.open

__all__ = [
    "AuthenticationError",
    "BitwardenConfig",
    "BitwardenError",
    "CommandError",
    "CustomField",
    "DecodeError",
    "Item",
    "ItemType",
    "Login",
    "LoginUri",
    "UnknownVaultStatusError",
    "VaultSession",
    "VaultState",
    "VaultStatus",
    "get_config",
    "open_session",
]
