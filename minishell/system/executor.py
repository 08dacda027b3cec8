#!/usr/bin/env python3
# minishell/system/executor.py
"""
External program execution.

Resolves a command name on PATH and runs it in the foreground with optional
stdout/stderr redirection.

Notes:
    - argv[0] is the name as typed, not the resolved path.
    - Redirected streams are bound straight to the opened files; nothing
      passes through this process.
    - Unredirected streams are inherited from the interpreter's terminal.
    - The call blocks until the child exits; there is no timeout.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from contextlib import ExitStack
from typing import Optional, Sequence

from minishell.commands.command_types import RedirectTarget
from minishell.errors import DispatchError
from minishell.system.path import find_in_path
from minishell.ui.console import print_line

logger = logging.getLogger(__name__)


def _open_redirect(stack: ExitStack, target: Optional[RedirectTarget]):
    """Open a redirect target for a child process, or None to inherit."""
    if target is None:
        return None
    try:
        return stack.enter_context(target.open(binary=True))
    except OSError as exc:
        raise DispatchError(
            f"{target.path}: {exc.strerror or exc}") from exc


def execute_external(
    name: str,
    args: Sequence[str],
    stdout_redirect: Optional[RedirectTarget] = None,
    stderr_redirect: Optional[RedirectTarget] = None,
) -> Optional[int]:
    """
    Run `name` with `args` and wait for it.

    Returns:
        The child's exit status, or None if `name` was not found on PATH
        (reported as "<name>: command not found").

    Raises:
        DispatchError: a redirect target could not be opened or the
            executable could not be started.
    """
    executable = find_in_path(name)
    if executable is None:
        print_line(f"{name}: command not found", flush=True)
        return None

    with ExitStack() as stack:
        stdout_file = _open_redirect(stack, stdout_redirect)
        stderr_file = _open_redirect(stack, stderr_redirect)

        # Keep our own buffered output ahead of the child's
        sys.stdout.flush()
        sys.stderr.flush()

        logger.debug("spawn %s -> %s %r", name, executable, list(args))
        try:
            completed = subprocess.run(
                [name, *args],
                executable=executable,
                stdout=stdout_file,
                stderr=stderr_file,
            )
        except OSError as exc:
            raise DispatchError(
                f"{name}: {exc.strerror or exc}") from exc

    logger.debug("%s exited with status %d", name, completed.returncode)
    return completed.returncode
