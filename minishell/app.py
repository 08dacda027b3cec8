#!/usr/bin/env python3
# minishell/app.py
from __future__ import annotations

"""
Entry point and read loop.

Startup:
- Initialize logging, load configuration, pick a CLI frontend.
Loop:
- Read one line, strip it, hand it to the dispatcher, repeat.
- Ctrl-C discards the current line; Ctrl-D ends the session with status 0.
- `exit 0` raises SystemExit(0) out of the dispatcher.
"""

import logging
from typing import Optional

from minishell.config import AppConfig, load_config_or_defaults
from minishell.interface import BaseCLI, handle_line, make_cli
from minishell.ui import init_logger, print_line

logger = logging.getLogger(__name__)


def boot(config: Optional[AppConfig] = None) -> tuple[AppConfig, BaseCLI]:
    """Configure logging and build the frontend described by `config`."""
    init_logger("minishell")
    if config is None:
        config = load_config_or_defaults()
    init_logger(
        "minishell",
        level=config.log_level,
        logfile=str(config.log_file_path) if config.log_file_path else None,
    )
    cli = make_cli(
        config.frontend,
        prompt=config.prompt,
        history_path=config.history_file_path,
        enable_completion=config.enable_completion,
    )
    logger.debug("frontend: %s", type(cli).__name__)
    return config, cli


def run_loop(cli: BaseCLI) -> int:
    """Read and dispatch lines until end of input. Returns the exit status."""
    with cli:
        while True:
            try:
                line = cli.get_line()
            except KeyboardInterrupt:
                print_line(flush=True)
                continue
            except EOFError:
                print_line(flush=True)
                return 0
            handle_line(line.strip())


def main() -> int:
    _, cli = boot()
    return run_loop(cli)
