#!/usr/bin/env python3
# minishell/interface/handler.py
from __future__ import annotations

"""
Command dispatch.

dispatch(line)     parse -> classify -> run; raises DispatchError on failure.
handle_line(line)  the read loop's entry point; reports failures and keeps
                   the interpreter alive.
"""

import logging

from minishell.commands import Builtin, ParsedCommand
from minishell.errors import DispatchError, ShellError
from minishell.interface.parser import parse
from minishell.system.executor import execute_external
from minishell.ui.sink import OutputSink

logger = logging.getLogger(__name__)


def _describe(exc: OSError) -> str:
    """Render an OSError as '<filename>: <reason>' when a filename is known."""
    reason = exc.strerror or str(exc)
    return f"{exc.filename}: {reason}" if exc.filename else reason


def _run_builtin(builtin: Builtin, command: ParsedCommand) -> None:
    try:
        with OutputSink(command.stdout_redirect, command.stderr_redirect) as sink:
            builtin.execute(command.parameters, sink)
    except OSError as exc:
        raise DispatchError(f"{builtin.value}: {_describe(exc)}") from exc


def dispatch(line: str) -> None:
    """
    Parse and execute one line.

    Raises:
        DispatchError: redirect target, working directory or spawn failure.
        SystemExit: from `exit 0`.
    """
    command = parse(line)
    if command.is_empty():
        return

    name = command.name
    builtin = Builtin.lookup(name)
    if builtin is not None:
        logger.debug("builtin %s %r", name, command.parameters)
        _run_builtin(builtin, command)
        return

    logger.debug("external %s %r", name, command.parameters)
    execute_external(
        name,
        command.parameters,
        command.stdout_redirect,
        command.stderr_redirect,
    )


def handle_line(input_line: str) -> bool:
    """
    Execute a line on behalf of the read loop.

    Returns:
        True on success, False if the line failed. Failures are reported on
        stderr through the logger; they never end the session.
    """
    try:
        dispatch(input_line.strip())
    except ShellError as exc:
        logger.error("%s", exc)
        return False
    return True
