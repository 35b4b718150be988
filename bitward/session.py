"""
Vault session adapter for the Bitwarden CLI.

``VaultSession.open()`` checks the vault state and, when needed, runs
``bw unlock`` or ``bw login`` with the terminal attached so a human can enter
the master password. The captured stdout becomes the session token, which is
appended as ``--session <token>`` to every later query.

Usage:
    from bitward import open_session
    vault = open_session()
    item = vault.get_item("2f6d...")
    logins = vault.get_items("--search", "github")
"""

from __future__ import annotations

import logging

from bitward import process
from bitward.config import BitwardenConfig, get_config
from bitward.errors import AuthenticationError
from bitward.models import Item, VaultState, VaultStatus

logger = logging.getLogger(__name__)


def auth_commands(state: VaultState, config: BitwardenConfig) -> list[list[str]]:
    """Commands that take the vault from ``state`` to unlocked, run in order.

    The last command's stdout is the session token. Empty for an unlocked vault.
    """
    bw = config.executable
    unlock = [bw, "unlock", "--raw"]
    if config.password_env is not None:
        unlock += ["--passwordenv", config.password_env]

    if state is VaultState.UNLOCKED:
        return []
    if state is VaultState.LOCKED:
        return [unlock]
    if config.has_api_key:
        # bw reads BW_CLIENTID / BW_CLIENTSECRET from its environment
        return [[bw, "login", "--raw", "--apikey"], unlock]
    return [[bw, "login", "--raw"]]


class VaultSession:
    """Holds one session token and issues read-only `bw` queries with it.

    Plain construction does no I/O; use ``VaultSession.open()`` to
    authenticate. Not safe for concurrent use.
    """

    def __init__(self, config: BitwardenConfig | None = None, session: str = ""):
        self.config = config or get_config()
        self._session = session

    @classmethod
    def open(cls, config: BitwardenConfig | None = None) -> VaultSession:
        """Authenticate against the vault and return a ready session."""
        vault = cls(config)
        vault._authenticate()
        return vault

    @property
    def session(self) -> str:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return bool(self._session)

    def _authenticate(self) -> None:
        state = self.status().state
        logger.info("Vault is %s", state.value)

        commands = auth_commands(state, self.config)
        if commands:
            if state is VaultState.LOCKED:
                logger.info("Unlocking vault")
            elif len(commands) > 1:
                logger.info("Logging in with API key")
            else:
                logger.info("Logging in")

            env = self.config.child_env() if self.config.has_api_key else None
            token = ""
            for cmd in commands:
                token = process.run_interactive(cmd, env=env)
            self._session = token

            status = self.status()
            if status.status != VaultState.UNLOCKED.value:
                raise AuthenticationError(status.status)

        if self.config.sync_on_open:
            self.sync()

    def _command(self, *args: str) -> list[str]:
        cmd = [self.config.executable, *args]
        if self._session:
            cmd += [process.SESSION_FLAG, self._session]
        return cmd

    def status(self) -> VaultStatus:
        """Current vault status as reported by `bw status`."""
        return process.run_json(self._command("status"), VaultStatus)

    def sync(self) -> None:
        """Pull the latest vault data from the server."""
        process.run(self._command("sync"))
        logger.info("Vault synced")

    def get_item(self, item_id: str) -> Item:
        """Fetch a single item by id."""
        return process.run_json(self._command("get", "item", item_id), Item)

    def get_items(self, *args: str) -> list[Item]:
        """List items, passing ``args`` straight through as `bw list items` filters.

        e.g. ``get_items("--folderid", fid)`` or ``get_items("--search", "github")``.
        Order is preserved from `bw`.
        """
        return process.run_json(self._command("list", "items", *args), list[Item])
