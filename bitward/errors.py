"""Exceptions raised by the Bitwarden CLI adapter."""

from __future__ import annotations


class BitwardenError(Exception):
    """Base class for every error this package raises."""


class CommandError(BitwardenError):
    """A `bw` invocation exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"{command}: exit status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class DecodeError(BitwardenError):
    """`bw` succeeded but its output did not decode as the expected record."""

    def __init__(self, target: str, detail: str):
        self.target = target
        super().__init__(f"unable to decode {target}: {detail}")


class UnknownVaultStatusError(BitwardenError):
    def __init__(self, status: str):
        self.status = status
        super().__init__(f"unknown vault status `{status}`")


class AuthenticationError(BitwardenError):
    """Unlock/login finished but the vault still is not unlocked."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"authentication failed: vault status `{status}`")
