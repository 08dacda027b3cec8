#!/usr/bin/env python3
# minishell/ui/console.py
from __future__ import annotations

import sys
import threading
from typing import IO, Optional

# Single shared print mutex for terminal output (sink writes and logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file: Optional[IO] = None, flush: bool = False) -> None:
    """
    Write `text` plus one newline to `file` (default: the current sys.stdout).

    Write errors propagate to the caller.
    """
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()
