#!/usr/bin/env python3
# minishell/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

Only the command name is completed: while the cursor is still inside the
first token, builtin names starting with the typed prefix are offered. Once
whitespace has been typed nothing is suggested.
"""

from minishell.commands import Builtin

# Builtin names offered for completion
BUILT_IN_COMMANDS: tuple[str, ...] = tuple(Builtin.names())

_WHITESPACE = (" ", "\t")


def _current_command_prefix(text_before_cursor: str) -> str | None:
    """
    Return the partial command name under the cursor.

    None when there is nothing to complete: the buffer is empty or the
    cursor has moved past the first token.
    """
    if not text_before_cursor:
        return None
    if any(sep in text_before_cursor for sep in _WHITESPACE):
        return None
    return text_before_cursor


def suggest(text_before_cursor: str) -> list[str]:
    """Builtin names that complete the command token being typed, sorted."""
    prefix = _current_command_prefix(text_before_cursor)
    if prefix is None:
        return []
    return sorted(name for name in BUILT_IN_COMMANDS if name.startswith(prefix))
