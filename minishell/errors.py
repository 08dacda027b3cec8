#!/usr/bin/env python3
# minishell/errors.py
from __future__ import annotations

"""Application-level exception types for minishell."""


class ShellError(Exception):
    """Base exception for minishell."""


class DispatchError(ShellError):
    """
    A command line could not be carried out.

    Raised for filesystem and spawn failures (redirect target cannot be opened,
    executable cannot be started, working directory cannot be read). Aborts the
    current line only; the read loop keeps going.
    """


class ConfigurationError(ShellError):
    """Raised when a configuration value is missing or malformed."""
