#!/usr/bin/env python3
# minishell/system/path.py
from __future__ import annotations

"""
Executable lookup on the PATH search list.

Only read-only stat calls are made; the first executable regular file wins.
"""

import os
import stat
from typing import Optional

# Any of owner/group/other execute bits
_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _is_executable_file(candidate: str) -> bool:
    try:
        st = os.stat(candidate)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & _EXEC_BITS)


def find_in_path(name: str) -> Optional[str]:
    """
    Return the first `<dir>/<name>` on PATH that is an executable regular file.

    Directories are searched in listed order. Returns None when PATH is unset
    or no candidate qualifies.
    """
    search_path = os.environ.get("PATH")
    if search_path is None:
        return None

    for directory in search_path.split(":"):
        candidate = os.path.join(directory, name)
        if _is_executable_file(candidate):
            return candidate
    return None
