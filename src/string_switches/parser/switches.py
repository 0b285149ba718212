"""Switch parser — turns ``/command arg ...`` text into switch lists.

The input is a sequence of switches, each optionally followed by
arguments, like you might pass to a DOS program::

    /coffee /milk soy /brand "Blind Tiger" /temp hot /sugar /syrup ginger vanilla

Multiple words after a switch become multiple arguments.  To make them one
argument, use double quotes (ASCII or smart quotes).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from string_switches.errors import SwitchSyntaxError
from string_switches.parser.quoting import (
    at_boundary,
    consume_quoted,
    scan_word,
    skip_whitespace,
)

logger = logging.getLogger(__name__)

# Characters allowed in a command name.  Deliberately ASCII lowercase only.
COMMAND_CHARS = frozenset("-abcdefghijklmnopqrstuvwxyz")

Switch = list[str]
SwitchList = list[Switch]


@dataclass(frozen=True)
class Command:
    """A ``/name`` token."""

    name: str


@dataclass(frozen=True)
class Literal:
    """A quoted or bare argument token."""

    text: str


Token = Command | Literal

# A rule looks at the input at a cursor and either declines (None),
# returns the token it recognized plus the new cursor, or raises.
_Rule = Callable[[str, int], tuple[Token, int] | None]


def _command(s: str, i: int) -> tuple[Token, int] | None:
    if s[i] != "/":
        return None
    j = i + 1
    while j < len(s) and s[j] in COMMAND_CHARS:
        j += 1
    if j == i + 1 or not at_boundary(s, j):
        return None
    return Command(s[i + 1 : j]), j


def _bogus_command(s: str, i: int) -> tuple[Token, int] | None:
    if s[i] != "/":
        return None
    end = scan_word(s, i + 1)
    if end == i + 1:
        return None
    raise SwitchSyntaxError(f"bogus /command: /{s[i + 1 : end]}")


def _empty_command(s: str, i: int) -> tuple[Token, int] | None:
    if s[i] != "/" or not at_boundary(s, i + 1):
        return None
    raise SwitchSyntaxError("bogus input: / with no command!")


def _quoted(s: str, i: int) -> tuple[Token, int] | None:
    found = consume_quoted(s, i, lambda end: at_boundary(s, end))
    if found is None:
        return None
    text, end = found
    return Literal(text), end


def _bareword(s: str, i: int) -> tuple[Token, int] | None:
    end = scan_word(s, i)
    if end == i:
        return None
    word = s[i:end]
    if "/" in word:
        raise SwitchSyntaxError("unquoted arguments may not contain slash")
    return Literal(word), end


# Order matters: a well-formed /command must win over the bogus-command
# rule, and both must be tried before generic literal matching.
_RULES: tuple[_Rule, ...] = (
    _command,
    _bogus_command,
    _empty_command,
    _quoted,
    _bareword,
)


def tokenize_switches(text: str) -> list[Token]:
    """Scan *text* into a flat list of :class:`Command` and :class:`Literal`.

    Raises
    ------
    SwitchSyntaxError
        On the first piece of input no rule accepts.
    """
    tokens: list[Token] = []
    i = skip_whitespace(text, 0)
    n = len(text)
    while i < n:
        for rule in _RULES:
            step = rule(text, i)
            if step is not None:
                break
        else:
            raise SwitchSyntaxError("incomprehensible input")
        token, i = step
        tokens.append(token)
        i = skip_whitespace(text, i)
    return tokens


def group_tokens(tokens: list[Token]) -> SwitchList:
    """Fold a token list into switches, one per :class:`Command`."""
    switches: SwitchList = []
    for token in tokens:
        if isinstance(token, Command):
            switches.append([token.name])
        elif isinstance(token, Literal):
            if not switches:
                raise SwitchSyntaxError("text with no switch")
            switches[-1].append(token.text)
        else:
            raise TypeError(f"unexpected token: {token!r}")
    return switches


def parse_switches(text: str) -> tuple[SwitchList | None, str | None]:
    """Parse a string of switches.

    Parameters
    ----------
    text : str
        Raw user input, e.g. ``'/milk soy /brand "Blind Tiger"'``.

    Returns
    -------
    tuple[SwitchList | None, str | None]
        ``(switches, None)`` on success, where each switch is a list of
        ``[command, *args]``; ``(None, error)`` on failure.  The error is a
        human-readable diagnostic.  Its wording may change, so do not
        branch on it.

    Examples
    --------
    >>> parse_switches('/milk soy /brand "Blind Tiger" /sugar')
    ([['milk', 'soy'], ['brand', 'Blind Tiger'], ['sugar']], None)
    >>> parse_switches("milk soy")
    (None, 'text with no switch')
    """
    try:
        switches = group_tokens(tokenize_switches(text))
    except SwitchSyntaxError as exc:
        logger.debug("rejected switch input %r: %s", text, exc)
        return None, str(exc)
    return switches, None
