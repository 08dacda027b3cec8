#!/usr/bin/env python3
# minishell/__init__.py
from __future__ import annotations
"""
minishell: an interactive command interpreter.

Keep this module free of eager imports; subpackages expose their own APIs
through their __init__.py files.
"""

__version__ = "0.1.0"
