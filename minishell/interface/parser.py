#!/usr/bin/env python3
# minishell/interface/parser.py
from __future__ import annotations

"""
Line parser: one line of text -> ParsedCommand.

Responsibilities:
- Split a line into arguments honoring single quotes, double quotes and
  backslash escapes.
- Recognize `>`, `>>`, `1>`, `2>`, `1>>`, `2>>` outside quotes and capture the
  target filename (quoted like any argument).

Parsing never fails. An unterminated quote runs to the end of the line, and a
trailing backslash is kept as a literal character.
"""

import enum
from typing import Optional

from minishell.commands.command_types import ParsedCommand, RedirectMode, RedirectTarget


class _State(enum.Enum):
    UNQUOTED = enum.auto()
    SINGLE_QUOTED = enum.auto()
    DOUBLE_QUOTED = enum.auto()


# Token separators outside quotes
_SEPARATORS = frozenset(" \t")
# Opening quote character -> state it enters
_OPENING_QUOTES = {"'": _State.SINGLE_QUOTED, '"': _State.DOUBLE_QUOTED}
# Quoted state -> character that closes it
_CLOSING_QUOTES = {_State.SINGLE_QUOTED: "'", _State.DOUBLE_QUOTED: '"'}
# Characters a backslash escapes inside double quotes; elsewhere it is literal
_DOUBLE_QUOTE_ESCAPABLE = frozenset('"\\$`\n')
_ESCAPE = "\\"
_REDIRECT = ">"
# Argument immediately before `>` that selects the stream
_FD_SELECTORS = {"1": 1, "2": 2}


class _Cursor:
    """Forward-only character iterator with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def __iter__(self) -> "_Cursor":
        return self

    def __next__(self) -> str:
        if self._pos >= len(self._text):
            raise StopIteration
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def peek(self) -> Optional[str]:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def take(self) -> Optional[str]:
        """Consume and return the next character, or None at end of line."""
        return next(self, None)


class _WordBuilder:
    """Accumulates one word while tracking its quoting state."""

    def __init__(self) -> None:
        self.state = _State.UNQUOTED
        self._chars: list[str] = []

    def __bool__(self) -> bool:
        return bool(self._chars)

    def append(self, ch: str) -> None:
        self._chars.append(ch)

    def take(self) -> str:
        word = "".join(self._chars)
        self._chars.clear()
        return word

    def feed(self, ch: str, cursor: _Cursor) -> bool:
        """
        Apply quoting and escaping rules to `ch`.

        Returns False when `ch` is an unquoted character with no quoting
        meaning; the caller decides whether it separates, redirects or is
        literal.
        """
        if ch == _ESCAPE:
            self._escape(cursor)
            return True
        if self.state is _State.UNQUOTED:
            if ch in _OPENING_QUOTES:
                self.state = _OPENING_QUOTES[ch]
                return True
            return False
        if ch == _CLOSING_QUOTES[self.state]:
            self.state = _State.UNQUOTED
        else:
            self._chars.append(ch)
        return True

    def _escape(self, cursor: _Cursor) -> None:
        if self.state is _State.SINGLE_QUOTED:
            self._chars.append(_ESCAPE)
        elif self.state is _State.DOUBLE_QUOTED:
            if cursor.peek() in _DOUBLE_QUOTE_ESCAPABLE:
                self._chars.append(cursor.take())
            else:
                self._chars.append(_ESCAPE)
        else:
            escaped = cursor.take()
            self._chars.append(_ESCAPE if escaped is None else escaped)


def _flush(word: _WordBuilder, arguments: list[str]) -> None:
    if word:
        arguments.append(word.take())


def _parse_redirect(cursor: _Cursor, result: ParsedCommand) -> None:
    """Handle a `>` just consumed from `cursor`, storing the target in `result`."""
    operator = _REDIRECT
    if cursor.peek() == _REDIRECT:
        operator += cursor.take()
    mode = RedirectMode.from_operator(operator)

    fd = 1
    if result.arguments and result.arguments[-1] in _FD_SELECTORS:
        fd = _FD_SELECTORS[result.arguments.pop()]

    while cursor.peek() in _SEPARATORS:
        cursor.take()

    filename = _WordBuilder()
    for ch in cursor:
        if filename.feed(ch, cursor):
            continue
        if ch in _SEPARATORS:
            break
        filename.append(ch)

    target = RedirectTarget(filename.take(), mode)
    if fd == 1:
        result.stdout_redirect = target
    else:
        result.stderr_redirect = target


def parse(line: str) -> ParsedCommand:
    """
    Parse one input line.

    Examples:
        parse("echo 'a b'  c").arguments   -> ['echo', 'a b', 'c']
        parse("ls 2>> err.log")            -> ['ls'], stderr -> err.log (append)
    """
    result = ParsedCommand()
    cursor = _Cursor(line)
    word = _WordBuilder()

    for ch in cursor:
        if word.feed(ch, cursor):
            continue
        if ch in _SEPARATORS:
            _flush(word, result.arguments)
        elif ch == _REDIRECT:
            _flush(word, result.arguments)
            _parse_redirect(cursor, result)
        else:
            word.append(ch)

    _flush(word, result.arguments)
    return result
