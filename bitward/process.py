"""Run `bw` and decode what it prints."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar, get_args, get_origin

from pydantic import TypeAdapter, ValidationError

from bitward.errors import CommandError, DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SESSION_FLAG = "--session"


def format_command(cmd: Sequence[str]) -> str:
    """Shell-quoted command line with the session token masked."""
    shown = list(cmd)
    for i, arg in enumerate(shown[:-1]):
        if arg == SESSION_FLAG:
            shown[i + 1] = "***"
    return shlex.join(shown)


def _capture(cmd: Sequence[str], env: Mapping[str, str] | None) -> bytes:
    """Run a non-interactive command and return its raw stdout.

    stdin is closed so `bw` can never block on a prompt. On a non-zero exit
    the captured stderr is folded into the raised CommandError.
    """
    logger.debug("Running %s", format_command(cmd))
    proc = subprocess.run(
        list(cmd),
        stdin=subprocess.DEVNULL,
        capture_output=True,
        env=env,
    )
    if proc.returncode != 0:
        logger.warning("%s exited with status %d", format_command(cmd), proc.returncode)
        stderr = (proc.stderr or b"").decode("utf-8", errors="replace")
        raise CommandError(format_command(cmd), proc.returncode, stderr)
    return proc.stdout or b""


def run(cmd: Sequence[str], *, env: Mapping[str, str] | None = None) -> str:
    """Run a non-interactive command and return its stdout as text."""
    return _capture(cmd, env).decode("utf-8", errors="replace")


def run_interactive(cmd: Sequence[str], *, env: Mapping[str, str] | None = None) -> str:
    """Run a command wired to the terminal, capturing only stdout.

    stdin and stderr are inherited so a human can answer prompts. Blocks
    until the child exits. stdout is returned byte for byte: no newline
    translation, and undecodable bytes survive as surrogate escapes so the
    value passes back through argv unchanged.
    """
    logger.debug("Running interactively %s", format_command(cmd))
    proc = subprocess.run(list(cmd), stdout=subprocess.PIPE, env=env)
    if proc.returncode != 0:
        logger.warning("%s exited with status %d", format_command(cmd), proc.returncode)
        raise CommandError(format_command(cmd), proc.returncode)
    return os.fsdecode(proc.stdout or b"")


def type_name(target: Any) -> str:
    """Readable name for a decode target, e.g. ``Item`` or ``list[Item]``."""
    origin = get_origin(target)
    if origin is not None:
        args = ", ".join(type_name(a) for a in get_args(target))
        return f"{origin.__name__}[{args}]"
    return getattr(target, "__name__", repr(target))


def run_json(
    cmd: Sequence[str],
    target: type[T],
    *,
    env: Mapping[str, str] | None = None,
) -> T:
    """Run a command and decode its stdout as ``target``."""
    out = _capture(cmd, env)
    try:
        return TypeAdapter(target).validate_json(out)
    except ValidationError as e:
        raise DecodeError(type_name(target), str(e)) from e
