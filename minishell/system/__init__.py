#!/usr/bin/env python3
# minishell/system/__init__.py
from __future__ import annotations

"""
Process-level helpers: PATH search and external program execution.
"""

from .path import find_in_path
from .executor import execute_external

__all__ = [
    "find_in_path",
    "execute_external",
]
