#!/usr/bin/env python3
# minishell/commands/builtins.py
from __future__ import annotations

"""
Commands implemented inside the interpreter process.

The set is closed: `Builtin` has one member per command and `Builtin.lookup`
maps an exact, case-sensitive name to it. Every builtin writes through the
OutputSink it is given, never to the terminal directly, so redirection is
invisible to the command logic.
"""

import enum
import logging
import os
from typing import TYPE_CHECKING, Optional, Sequence

from minishell.system.path import find_in_path

if TYPE_CHECKING:  # pragma: no cover
    from minishell.ui.sink import OutputSink

logger = logging.getLogger(__name__)


class Builtin(enum.Enum):
    """Closed set of builtin commands; each value is the literal name."""

    EXIT = "exit"
    ECHO = "echo"
    TYPE = "type"
    PWD = "pwd"
    CD = "cd"

    @classmethod
    def lookup(cls, name: str) -> Optional["Builtin"]:
        """Return the builtin called exactly `name`, or None."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]

    def execute(self, args: Sequence[str], sink: "OutputSink") -> None:
        """Run this builtin with `args` (command name excluded)."""
        _HANDLERS[self](args, sink)


# ---------------------------------------------------------------------------
# Implementations
# ---------------------------------------------------------------------------


def _exit(args: Sequence[str], sink: "OutputSink") -> None:
    # Only a literal "0" exits; anything else is ignored.
    if args and args[0] == "0":
        raise SystemExit(0)


def _echo(args: Sequence[str], sink: "OutputSink") -> None:
    sink.write_stdout(" ".join(args))


def _type(args: Sequence[str], sink: "OutputSink") -> None:
    if not args:
        return
    target = args[0]
    if Builtin.lookup(target) is not None:
        sink.write_stdout(f"{target} is a shell builtin")
        return
    path = find_in_path(target)
    if path is not None:
        sink.write_stdout(f"{target} is {path}")
    else:
        sink.write_stdout(f"{target}: not found")


def _pwd(args: Sequence[str], sink: "OutputSink") -> None:
    sink.write_stdout(os.getcwd())


def _cd(args: Sequence[str], sink: "OutputSink") -> None:
    if not args:
        return
    path = args[0]
    target = os.environ.get("HOME", path) if path == "~" else path
    try:
        os.chdir(target)
    except OSError as exc:
        logger.debug("cd %r failed: %s", target, exc)
        sink.write_stderr(f"cd: {path}: No such file or directory")


_HANDLERS = {
    Builtin.EXIT: _exit,
    Builtin.ECHO: _echo,
    Builtin.TYPE: _type,
    Builtin.PWD: _pwd,
    Builtin.CD: _cd,
}
