#!/usr/bin/env python3
# minishell/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .ansi import ANSI, strip_ansi, supports_color, colorize
from .console import PRINT_MUTEX, print_line
from .sink import OutputSink
from .logging import init_logger, ColorizingStreamHandler, PlainFormatter

__all__ = [
    "ANSI",
    "strip_ansi",
    "supports_color",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "OutputSink",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
