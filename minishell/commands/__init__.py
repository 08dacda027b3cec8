#!/usr/bin/env python3
# minishell/commands/__init__.py
from __future__ import annotations

"""
Package for command data structures and builtins.

Provides:
- Parse results and redirect targets (`ParsedCommand`, `RedirectTarget`,
  `RedirectMode`).
- The closed builtin table (`Builtin`).

This package re-exports public APIs from:
- command_types.py
- builtins.py
"""


# Re-export from submodules (command_types first: builtins' imports need it)
from .command_types import ParsedCommand, RedirectMode, RedirectTarget
from .builtins import Builtin

__all__ = [
    "ParsedCommand",
    "RedirectMode",
    "RedirectTarget",
    "Builtin",
]
