#!/usr/bin/env python3
# minishell/commands/command_types.py
from __future__ import annotations

"""
Command data structures.

This module defines:
- RedirectMode: truncate or append discipline for a redirect target.
- RedirectTarget: destination file for one output stream, and the single place
  that knows how such a file is opened.
- ParsedCommand: the argument list plus optional stdout/stderr redirects
  produced for one input line.
"""

import enum
from dataclasses import dataclass, field
from typing import IO, Optional


class RedirectMode(enum.Enum):
    """File-open discipline for `>` (TRUNCATE) and `>>` (APPEND)."""

    TRUNCATE = "w"
    APPEND = "a"

    @classmethod
    def from_operator(cls, operator: str) -> "RedirectMode":
        return cls.APPEND if operator == ">>" else cls.TRUNCATE


@dataclass(frozen=True, slots=True)
class RedirectTarget:
    """
    Destination for a redirected output stream.

    Both the in-process output sink (builtins) and the process executor
    (external programs) open files through `open()`, so truncate/append
    behaves the same either way.

    Attributes:
        path: Destination path exactly as typed (relative to the cwd).
        mode: TRUNCATE for `>`, APPEND for `>>`.
    """

    path: str
    mode: RedirectMode = RedirectMode.TRUNCATE

    @property
    def open_mode(self) -> str:
        return self.mode.value

    def open(self, *, binary: bool = False) -> IO:
        """Create the file if needed and open it for writing."""
        if binary:
            return open(self.path, self.open_mode + "b")
        # surrogateescape: undecodable input bytes are written back unchanged
        return open(self.path, self.open_mode, encoding="utf-8",
                    errors="surrogateescape")


@dataclass(slots=True)
class ParsedCommand:
    """
    Result of parsing one input line.

    Attributes:
        arguments: Command name followed by its parameters.
        stdout_redirect: Target for fd 1, if any (last `>`/`1>` wins).
        stderr_redirect: Target for fd 2, if any (last `2>` wins).
    """

    arguments: list[str] = field(default_factory=list)
    stdout_redirect: Optional[RedirectTarget] = None
    stderr_redirect: Optional[RedirectTarget] = None

    @property
    def name(self) -> Optional[str]:
        return self.arguments[0] if self.arguments else None

    @property
    def parameters(self) -> list[str]:
        return self.arguments[1:]

    def is_empty(self) -> bool:
        return not self.arguments
