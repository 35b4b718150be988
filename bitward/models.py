"""Typed records for the JSON documents `bw` prints."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bitward.errors import UnknownVaultStatusError


class _Record(BaseModel):
    """Read-only snapshot decoded from `bw`. Unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# ─── Status ──────────────────────────────────────────────────────────────


class VaultState(str, Enum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"
    UNAUTHENTICATED = "unauthenticated"


class VaultStatus(_Record):
    """Output of `bw status`."""

    server_url: str | None = Field(None, alias="serverUrl")
    last_sync: datetime | None = Field(None, alias="lastSync")
    user_email: str | None = Field(None, alias="userEmail")
    user_id: str | None = Field(None, alias="userId")
    status: str

    @property
    def state(self) -> VaultState:
        """The status as a known state. Raises UnknownVaultStatusError otherwise."""
        try:
            return VaultState(self.status)
        except ValueError:
            raise UnknownVaultStatusError(self.status) from None


# ─── Items ───────────────────────────────────────────────────────────────


class ItemType(IntEnum):
    LOGIN = 1
    SECURE_NOTE = 2
    CARD = 3
    IDENTITY = 4


class CustomField(_Record):
    name: str | None = None
    value: str | None = None
    type: int = 0
    linked_id: int | str | None = Field(None, alias="linkedId")


class LoginUri(_Record):
    match: int | None = None
    uri: str | None = None


class Login(_Record):
    uris: list[LoginUri] = []
    username: str | None = None
    password: str | None = None
    totp: str | None = None
    password_revision_date: datetime | None = Field(None, alias="passwordRevisionDate")

    @field_validator("uris", mode="before")
    @classmethod
    def null_uris(cls, v):
        return [] if v is None else v


class Item(_Record):
    """A vault entry as printed by `bw get item` / `bw list items`."""

    object: str = "item"
    id: str
    organization_id: str | None = Field(None, alias="organizationId")
    folder_id: str | None = Field(None, alias="folderId")
    type: int = ItemType.LOGIN
    reprompt: int = 0
    name: str
    notes: str | None = None
    favorite: bool = False
    custom_fields: list[CustomField] = Field([], alias="fields")
    login: Login | None = None
    collection_ids: list[str] = Field([], alias="collectionIds")
    revision_date: datetime | None = Field(None, alias="revisionDate")

    # `bw` prints null rather than [] for items without these
    @field_validator("custom_fields", "collection_ids", mode="before")
    @classmethod
    def null_lists(cls, v):
        return [] if v is None else v

    def field_value(self, name: str) -> str | None:
        """Value of the first custom field called ``name``, or None."""
        for f in self.custom_fields:
            if f.name == name:
                return f.value
        return None
