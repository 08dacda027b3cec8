#!/usr/bin/env python3
# minishell/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface and command dispatch.

Provides:
- The line parser (quoting, escaping, redirection operators).
- Builtin-name completion.
- The dispatcher used by the read loop.
- CLI frontends with history and completion (prompt_toolkit / readline / plain).
"""


# Completion FIRST (cli depends on it)
from .completion import suggest, BUILT_IN_COMMANDS

# Parser
from .parser import parse

# Dispatcher
from .handler import dispatch, handle_line

# CLI frontends (after completion is available)
from .cli import (
    BaseCLI,
    PlainCLI,
    PromptToolkitCLI,
    ReadlineCLI,
    make_cli,
)

__all__ = [
    # completion
    "suggest",
    "BUILT_IN_COMMANDS",
    # parser
    "parse",
    # handler
    "dispatch",
    "handle_line",
    # cli
    "BaseCLI",
    "PlainCLI",
    "PromptToolkitCLI",
    "ReadlineCLI",
    "make_cli",
]
