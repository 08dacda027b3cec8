#!/usr/bin/env python3
# minishell/ui/logging.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from minishell.ui.ansi import colorize, strip_ansi, supports_color
from minishell.ui.console import PRINT_MUTEX


class ColorizingStreamHandler(logging.StreamHandler):
    """
    StreamHandler that colours records by level on a TTY, plain text otherwise.
    """

    _LEVEL_STYLES = {
        logging.DEBUG: ("bright_black",),
        logging.INFO: (),
        logging.WARNING: ("yellow",),
        logging.ERROR: ("red",),
        logging.CRITICAL: ("magenta", "bold"),
    }

    def __init__(self, stream=None) -> None:
        super().__init__(stream)
        self._use_ansi = supports_color(self.stream)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)

            if self._use_ansi:
                message = colorize(
                    message, *self._LEVEL_STYLES.get(record.levelno, ()))
            else:
                message = strip_ansi(message)

            with PRINT_MUTEX:
                self.stream.write(message + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class PlainFormatter(logging.Formatter):
    """Formatter that strips ANSI (good for log files)."""

    def format(self, record: logging.LogRecord) -> str:
        record.msg = strip_ansi(str(record.msg))
        return super().format(record)


def init_logger(
    name: str = "minishell",
    level: Union[int, str] = logging.WARNING,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """
    Initialize the application logger.

    Console: stderr, `[LEVEL] message`, coloured when stderr is a TTY.
    File (optional): rotating, plain text, UTF-8, always at DEBUG.
    Calling it again only adjusts the level; handlers are not duplicated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if logfile else level)
    logger.propagate = False

    console_handler = next(
        (h for h in logger.handlers if isinstance(h, ColorizingStreamHandler)), None)
    if console_handler is None:
        console_handler = ColorizingStreamHandler(stream=sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console_handler)
    console_handler.setLevel(level)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        try:
            Path(logfile).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                logfile, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
            )
        except OSError as exc:
            logger.setLevel(level)
            logger.warning("log file disabled (%s): %s", logfile, exc)
            return logger
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            PlainFormatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger
