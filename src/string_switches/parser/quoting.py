"""Quoted-string scanning shared by the switch and colonstring parsers.

A quoted run opens with ``"`` or ``“`` and closes with ``"`` or ``”``.
Inside it, a backslash followed by any quote glyph stands for that glyph;
any other quote glyph ends (or breaks) the run.  Even a quoted string may
not contain control characters.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable

OPEN_QUOTES = frozenset('"“')
CLOSE_QUOTES = frozenset('"”')
QUOTE_CHARS = OPEN_QUOTES | CLOSE_QUOTES


def is_control(ch: str) -> bool:
    """Return True if *ch* is in any Unicode ``C*`` general category."""
    return unicodedata.category(ch).startswith("C")


def consume_quoted(
    s: str,
    i: int,
    accept: Callable[[int], bool] | None = None,
) -> tuple[str, int] | None:
    """Consume a quoted run starting at the opening quote ``s[i]``.

    Returns ``(content, new_index)`` where *content* excludes the delimiters
    and has its escaped quotes unescaped, and *new_index* points just past
    the closing quote.  Returns None when ``s[i]`` is not an opening quote,
    or when no closing quote can be found.

    The longest run wins.  If scanning forward hits end of input, a control
    character or a stray opening quote, or if *accept* rejects where the
    run closed, the run is closed instead at the last escaped closing quote
    before that point, reading its backslash literally.  So ``"C:\\dir\\"``
    yields ``C:\\dir\\``.

    Parameters
    ----------
    accept : callable, optional
        Called with each candidate *new_index*, longest first; the first
        one it accepts is used.

    Examples
    --------
    >>> consume_quoted('"Blind Tiger" hot', 0)
    ('Blind Tiger', 13)
    >>> consume_quoted('“say \\\\"hi\\\\"”', 0)
    ('say "hi"', 12)
    >>> consume_quoted('"no end', 0) is None
    True
    """
    n = len(s)
    if i >= n or s[i] not in OPEN_QUOTES:
        return None
    i += 1  # skip opening quote
    buf: list[str] = []
    closed: tuple[str, int] | None = None
    # (len(buf), end) for every backslash + closing quote seen so far
    escaped_closes: list[tuple[int, int]] = []
    while i < n:
        ch = s[i]
        if ch == "\\" and i + 1 < n and s[i + 1] in QUOTE_CHARS:
            if s[i + 1] in CLOSE_QUOTES:
                escaped_closes.append((len(buf), i + 2))
            buf.append(s[i + 1])
            i += 2
            continue
        if ch in CLOSE_QUOTES:
            closed = "".join(buf), i + 1  # skip closing quote
            break
        if ch in QUOTE_CHARS or is_control(ch):
            break
        buf.append(ch)
        i += 1

    if closed is not None and (accept is None or accept(closed[1])):
        return closed
    for kept, end in reversed(escaped_closes):
        if accept is None or accept(end):
            return "".join(buf[:kept]) + "\\", end
    return None


def at_boundary(s: str, i: int) -> bool:
    """Return True if position *i* is end of input or whitespace."""
    return i >= len(s) or s[i].isspace()


def skip_whitespace(s: str, i: int) -> int:
    """Return the first index at or after *i* that is not whitespace."""
    n = len(s)
    while i < n and s[i].isspace():
        i += 1
    return i


def scan_word(s: str, i: int) -> int:
    """Return the index just past the non-whitespace run starting at *i*."""
    n = len(s)
    while i < n and not s[i].isspace():
        i += 1
    return i
