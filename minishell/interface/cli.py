#!/usr/bin/env python3
# minishell/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order (FRONTEND=auto):
    1) prompt_toolkit (live completion + history)
    2) readline (tab completion + history)
    3) plain input (last resort)

Every frontend hands back one line per call; EOFError / KeyboardInterrupt
propagate to the read loop.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from minishell.interface.completion import suggest, _current_command_prefix

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "$ "


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses should implement:
        - setup()
        - get_line()
        - teardown()

    This base also provides context manager support to guarantee teardown.
    """

    def __init__(
        self,
        prompt: str = DEFAULT_PROMPT,
        history_path: Optional[Path] = None,
        enable_completion: bool = True,
    ) -> None:
        self.prompt = prompt
        self.history_path = history_path
        self.enable_completion = enable_completion

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def get_line(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    def _touch_history(self) -> bool:
        if self.history_path is None:
            return False
        try:
            self.history_path.parent.mkdir(parents=True, exist_ok=True)
            self.history_path.touch(exist_ok=True)
        except OSError as exc:
            logger.warning("history disabled (%s): %s", self.history_path, exc)
            self.history_path = None
            return False
        return True

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.teardown()
        except OSError as err:
            logger.debug("frontend teardown failed: %s", err)


# ===== Last resort: plain input =====
class PlainCLI(BaseCLI):
    """No completion, no history."""

    def get_line(self) -> str:
        return input(self.prompt)


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Rich line editor with history and live completion."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion

        self._session_cls = PromptSession
        self._session = None

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                text_before_cursor = document.text_before_cursor
                prefix = _current_command_prefix(text_before_cursor) or ""
                for word in suggest(text_before_cursor):
                    # replace the typed prefix; trailing space starts the next token
                    yield Completion(f"{word} ", start_position=-len(prefix), display=word)

        self._completer = _Completer() if self.enable_completion else None

    def setup(self) -> None:
        from prompt_toolkit.history import FileHistory, InMemoryHistory

        history = (FileHistory(str(self.history_path))
                   if self._touch_history() else InMemoryHistory())
        self._session = self._session_cls(
            history=history,
            completer=self._completer,
            complete_while_typing=True,
        )

    def get_line(self) -> str:
        if self._session is None:
            self.setup()
        return self._session.prompt(self.prompt)

    def teardown(self) -> None:
        # prompt_toolkit flushes history automatically
        self._session = None


# ===== Fallback: readline =====
class ReadlineCLI(BaseCLI):
    """Fallback editor with tab completion and history."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        import readline  # type: ignore[attr-defined]

        self.readline = readline

    def setup(self) -> None:
        if self._touch_history():
            try:
                self.readline.read_history_file(str(self.history_path))
            except OSError as exc:
                logger.debug("could not read history: %s", exc)

        if not self.enable_completion:
            return

        self.readline.set_completer_delims(" \t\n")

        def _complete(text_fragment: str, state_index: int) -> Optional[str]:
            # Complete against the whole buffer so only the first token matches
            buffer_text = self.readline.get_line_buffer()[:self.readline.get_endidx()]
            matches = suggest(buffer_text)
            return matches[state_index] if state_index < len(matches) else None

        self.readline.set_completer(_complete)
        self.readline.parse_and_bind("tab: complete")

    def get_line(self) -> str:
        return input(self.prompt)

    def teardown(self) -> None:
        if self.history_path is not None:
            self.readline.write_history_file(str(self.history_path))


_FRONTENDS = {
    "prompt_toolkit": PromptToolkitCLI,
    "readline": ReadlineCLI,
    "plain": PlainCLI,
}


def make_cli(
    frontend: str = "auto",
    *,
    prompt: str = DEFAULT_PROMPT,
    history_path: Optional[Path] = None,
    enable_completion: bool = True,
) -> BaseCLI:
    """
    Build the requested frontend, or the best available one for "auto".
    """
    options = dict(prompt=prompt, history_path=history_path,
                   enable_completion=enable_completion)
    if frontend != "auto":
        return _FRONTENDS[frontend](**options)

    # Piped input: no line editing
    if not sys.stdin.isatty():
        return PlainCLI(**options)

    for name in ("prompt_toolkit", "readline"):
        try:
            return _FRONTENDS[name](**options)
        except ImportError as exc:
            logger.debug("frontend %s unavailable: %s", name, exc)
    return PlainCLI(**options)
