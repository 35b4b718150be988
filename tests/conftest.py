"""Shared fixtures for bitward tests: a scripted stand-in for `bw`."""

from __future__ import annotations

import json
import subprocess

import pytest

ITEM = {
    "object": "item",
    "id": "3c8a2d7e-1b4f-4e0a-9d2c-7f6e5a4b3c21",
    "organizationId": "b1f0c3a2-6d4e-4f8a-9b7c-2e1d0f9a8b76",
    "folderId": None,
    "type": 1,
    "reprompt": 0,
    "name": "GitHub",
    "notes": None,
    "favorite": True,
    "fields": [
        {"name": "recovery", "value": "abcd-efgh", "type": 1, "linkedId": None},
        {"name": "username-link", "value": None, "type": 3, "linkedId": 100},
    ],
    "login": {
        "uris": [{"match": None, "uri": "https://github.com/login"}],
        "username": "octocat",
        "password": "hunter2",
        "totp": None,
        "passwordRevisionDate": None,
    },
    "collectionIds": ["9e8d7c6b-5a4f-4e3d-2c1b-0a9f8e7d6c5b"],
    "revisionDate": "2024-06-15T12:00:00.000Z",
}

STATUS = {
    "serverUrl": "https://vault.example.com",
    "lastSync": "2024-06-15T12:00:00.000Z",
    "userEmail": "octocat@example.com",
    "userId": "5d4c3b2a-1f0e-4d9c-8b7a-6f5e4d3c2b1a",
    "status": "unlocked",
}


def completed(stdout: str | bytes = "", returncode: int = 0, stderr: str | bytes = ""):
    """A finished child process; text is encoded since `bw` output is captured as bytes."""
    if isinstance(stdout, str):
        stdout = stdout.encode()
    if isinstance(stderr, str):
        stderr = stderr.encode()
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class FakeBW:
    """Replaces subprocess.run and answers `bw` subcommands.

    ``statuses`` are handed out in order, one per `bw status` call.
    ``responses`` maps a subcommand (``"unlock"``, ``"sync"`` ...) to a
    CompletedProcess or an exception to raise.
    """

    def __init__(self):
        self.calls: list[tuple[list[str], dict]] = []
        self.statuses: list[str] = []
        self.responses: dict = {}

    def __call__(self, cmd, **kwargs):
        self.calls.append((list(cmd), kwargs))
        sub = cmd[1]
        if sub == "status":
            return completed(json.dumps({**STATUS, "status": self.statuses.pop(0)}))
        response = self.responses.get(sub, completed(""))
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def argvs(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]

    @property
    def subcommands(self) -> list[str]:
        return [argv[1] for argv, _ in self.calls]

    def call(self, subcommand: str, n: int = 0) -> tuple[list[str], dict]:
        """The n-th recorded call of ``subcommand``."""
        return [c for c in self.calls if c[0][1] == subcommand][n]


@pytest.fixture
def fake_bw(monkeypatch) -> FakeBW:
    fake = FakeBW()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def item_json() -> dict:
    return json.loads(json.dumps(ITEM))


@pytest.fixture(name="completed")
def completed_fixture():
    """Factory for subprocess.CompletedProcess results."""
    return completed
