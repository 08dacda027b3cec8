#!/usr/bin/env python3
# minishell/ui/sink.py
from __future__ import annotations

"""
Per-command output destination for builtins.

An OutputSink holds at most one open file per stream. Streams without a
redirect target write to the terminal (the current sys.stdout / sys.stderr).
Use it as a context manager so files are flushed and closed on every exit
path, including `exit` raising SystemExit.
"""

import logging
import sys
from typing import IO, Optional

from minishell.commands.command_types import RedirectTarget
from minishell.ui.console import print_line

logger = logging.getLogger(__name__)


class OutputSink:
    """
    Scoped stdout/stderr destination for one builtin invocation.

    Opening a redirect target may raise OSError (permission denied, missing
    parent directory, ...). If stdout opens but stderr fails, the stdout
    file is closed before the error propagates.
    """

    def __init__(
        self,
        stdout_redirect: Optional[RedirectTarget] = None,
        stderr_redirect: Optional[RedirectTarget] = None,
    ) -> None:
        self._stdout_file: Optional[IO[str]] = None
        self._stderr_file: Optional[IO[str]] = None

        if stdout_redirect is not None:
            logger.debug("stdout -> %s (%s)", stdout_redirect.path,
                         stdout_redirect.mode.name.lower())
            self._stdout_file = stdout_redirect.open()
        if stderr_redirect is not None:
            logger.debug("stderr -> %s (%s)", stderr_redirect.path,
                         stderr_redirect.mode.name.lower())
            try:
                self._stderr_file = stderr_redirect.open()
            except OSError:
                self.close()
                raise

    # ---------------- Writing ----------------

    def write_stdout(self, text: str) -> None:
        """Write `text` and a newline to the stdout destination."""
        if self._stdout_file is not None:
            self._stdout_file.write(f"{text}\n")
        else:
            print_line(text, file=sys.stdout, flush=True)

    def write_stderr(self, text: str) -> None:
        """Write `text` and a newline to the stderr destination."""
        if self._stderr_file is not None:
            self._stderr_file.write(f"{text}\n")
        else:
            print_line(text, file=sys.stderr, flush=True)

    # ---------------- Lifecycle ----------------

    @property
    def closed(self) -> bool:
        return self._stdout_file is None and self._stderr_file is None

    def close(self) -> None:
        """Flush and release any redirect files. Safe to call twice."""
        files = [f for f in (self._stdout_file, self._stderr_file) if f is not None]
        self._stdout_file = None
        self._stderr_file = None
        first_error: Optional[BaseException] = None
        for handle in files:
            try:
                handle.close()
            except OSError as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def __enter__(self) -> "OutputSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
