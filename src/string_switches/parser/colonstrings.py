"""Colonstring parser — turns search-bar text into ``key:value`` hunks.

Instead of ``/switch`` input this expects the sort of thing you might type
into a search bar::

    best "thanksgiving recipe" type:pie

Each ``key:value`` (or ``key:v1:v2...``) run becomes a hunk
``[key, value, ...]``.  Anything else is handed to a fallback, which decides
what, if anything, to make of it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from string_switches.errors import OptionsError
from string_switches.parser.quoting import QUOTE_CHARS, at_boundary, consume_quoted

logger = logging.getLogger(__name__)

IDENTIFIER_RE = re.compile(r"[-a-zA-Z][-_a-zA-Z0-9]*")

Hunk = list[str]
HunkList = list[Hunk]


@dataclass
class Remaining:
    """The unconsumed tail of a colonstring being parsed.

    Fallbacks receive this buffer and must shorten :attr:`text` by whatever
    they consume.
    """

    text: str

    def take_word(self) -> str:
        """Remove and return the first whitespace-delimited word."""
        parts = self.text.split(None, 1)
        word = parts[0] if parts else ""
        self.text = parts[1] if len(parts) > 1 else ""
        return word


class Fallback(Protocol):
    """Handler for text that does not look like ``key:value``."""

    def __call__(self, remaining: Remaining) -> Hunk | None: ...


def literal_fallback(tag: str) -> Fallback:
    """Build a fallback that turns the next word into ``[tag, word]``.

    >>> fb = literal_fallback("other")
    >>> rest = Remaining("baz quux:1")
    >>> fb(rest), rest.text
    (['other', 'baz'], 'quux:1')
    """

    def consume(remaining: Remaining) -> Hunk | None:
        return [tag, remaining.take_word()]

    return consume


def skip_fallback() -> Fallback:
    """Build a fallback that silently drops the next word."""

    def consume(remaining: Remaining) -> Hunk | None:
        remaining.take_word()
        return None

    return consume


def match_colonstring(s: str, i: int = 0) -> tuple[Hunk, int] | None:
    """Match ``identifier(:value)+`` at *i*, followed by whitespace or end.

    Values are either quoted strings (unescaped) or runs of characters that
    are not whitespace, colons or quotes.

    Returns ``(hunk, new_index)`` or None.
    """
    m = IDENTIFIER_RE.match(s, i)
    if m is None:
        return None
    hunk: Hunk = [m.group()]
    j = m.end()
    n = len(s)
    while j < n and s[j] == ":":
        j += 1
        found = consume_quoted(s, j, lambda end: at_boundary(s, end) or s[end] == ":")
        if found is not None:
            value, j = found
        else:
            start = j
            while j < n and not s[j].isspace() and s[j] != ":" and s[j] not in QUOTE_CHARS:
                j += 1
            if j == start:
                return None
            value = s[start:j]
        hunk.append(value)
    if len(hunk) < 2 or not at_boundary(s, j):
        return None
    return hunk, j


def _resolve_fallback(
    fallback: Fallback | None,
    literal: str | None,
    skip_unmatched: bool,
) -> Fallback | None:
    chosen = [fallback is not None, literal is not None, skip_unmatched]
    if sum(chosen) > 1:
        raise OptionsError("give at most one of fallback, literal, skip_unmatched")
    if fallback is not None:
        if not callable(fallback):
            raise OptionsError(f"fallback must be callable, not {type(fallback).__name__}")
        return fallback
    if literal is not None:
        return literal_fallback(literal)
    if skip_unmatched:
        return skip_fallback()
    return None


def parse_colonstrings(
    text: str,
    fallback: Fallback | None = None,
    *,
    literal: str | None = None,
    skip_unmatched: bool = False,
) -> HunkList | None:
    """Parse search-bar style text into a list of hunks.

    Parameters
    ----------
    text : str
        Input such as ``'foo:bar baz quux:"Trail Mix"'``.
    fallback : callable, optional
        Called with a :class:`Remaining` whenever the text at the cursor is
        not a ``key:value`` run.  It must remove what it consumes from
        ``remaining.text`` and return a hunk to append, or None.
    literal : str, optional
        Shortcut for ``fallback=literal_fallback(literal)``: each
        unmatched word becomes ``[literal, word]``.
    skip_unmatched : bool
        Shortcut for ``fallback=skip_fallback()``: unmatched words are
        dropped one at a time.

    Returns
    -------
    HunkList | None
        The hunks in input order, or None if an iteration failed to consume
        anything (no fallback, or a fallback that made no progress).

    Raises
    ------
    OptionsError
        If more than one of *fallback*, *literal*, *skip_unmatched* is given.

    Examples
    --------
    >>> parse_colonstrings('foo:bar baz quux:"Trail Mix"', literal="other")
    [['foo', 'bar'], ['other', 'baz'], ['quux', 'Trail Mix']]
    >>> parse_colonstrings("plain words") is None
    True
    """
    consume = _resolve_fallback(fallback, literal, skip_unmatched)
    hunks: HunkList = []
    remaining = Remaining(text)
    last_len: int | None = None

    while True:
        remaining.text = remaining.text.lstrip()
        if not remaining.text:
            return hunks

        if last_len is not None and len(remaining.text) >= last_len:
            logger.debug("colonstring parse made no progress at %r", remaining.text)
            return None
        last_len = len(remaining.text)

        match = match_colonstring(remaining.text)
        if match is not None:
            hunk, end = match
            hunks.append(hunk)
            remaining.text = remaining.text[end:]
            continue

        if consume is not None:
            hunk = consume(remaining)
            if hunk is not None:
                hunks.append(hunk)
