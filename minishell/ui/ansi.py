#!/usr/bin/env python3
# minishell/ui/ansi.py
from __future__ import annotations

import os
import re
from typing import IO, Optional

# ---- Core SGR map -----------------------------------------------------------

# Foreground: 30-37, Bright Foreground: 90-97
ANSI = {
    "reset": "\x1b[0m",

    # styles
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",

    # fg 8-color
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",

    # fg bright
    "bright_black": "\x1b[90m",
    "bright_red": "\x1b[91m",
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def supports_color(stream: Optional[IO] = None) -> bool:
    """
    True when escape sequences should be emitted to `stream`.

    Honors NO_COLOR (https://no-color.org) and TERM=dumb; otherwise requires
    the stream to be a TTY.
    """
    if os.environ.get("NO_COLOR") or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


def colorize(text: str, *styles: str) -> str:
    """
    Wrap text with one or more SGR styles/keys from ANSI (e.g., 'red', 'bold').
    Always auto-resets at the end.
    """
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text
