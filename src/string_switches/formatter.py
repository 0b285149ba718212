"""Render switch lists back into text that :func:`parse_switches` accepts."""

from __future__ import annotations

from string_switches.errors import FormatError
from string_switches.parser.quoting import OPEN_QUOTES, QUOTE_CHARS, is_control
from string_switches.parser.switches import COMMAND_CHARS, Switch, SwitchList


def quote_argument(arg: str) -> str:
    """Return *arg* as a single switch argument.

    Plain words are returned as-is.  Anything that would not survive as a
    bare word (whitespace, slashes, a leading quote, or the empty string)
    is wrapped in ASCII double quotes with embedded quote glyphs escaped.

    >>> quote_argument("soy")
    'soy'
    >>> quote_argument("Blind Tiger")
    '"Blind Tiger"'
    >>> quote_argument('say "hi"')
    '"say \\\\"hi\\\\""'
    """
    if any(is_control(ch) for ch in arg):
        raise FormatError(f"argument contains control characters: {arg!r}")
    if arg and "/" not in arg and arg[0] not in OPEN_QUOTES and not any(
        ch.isspace() for ch in arg
    ):
        return arg
    body = "".join(f"\\{ch}" if ch in QUOTE_CHARS else ch for ch in arg)
    return f'"{body}"'


def _switch_pieces(switch: Switch) -> list[str]:
    if not switch:
        raise FormatError("switch has no command")
    name, *args = switch
    if not name or any(ch not in COMMAND_CHARS for ch in name):
        raise FormatError(f"bogus /command: /{name}")
    return [f"/{name}"] + [quote_argument(arg) for arg in args]


def _join(pieces: list[str]) -> str:
    # A quoted piece ending in a backslash only closes where it should when
    # nothing follows it; otherwise a later quote would end the run.
    for piece in pieces[:-1]:
        if piece.startswith('"') and piece.endswith('\\"'):
            raise FormatError(
                f"quoted argument ending in a backslash must come last: {piece}"
            )
    return " ".join(pieces)


def format_switch(switch: Switch) -> str:
    """Format one ``[command, *args]`` switch as ``/command arg ...``."""
    return _join(_switch_pieces(switch))


def format_switches(switches: SwitchList) -> str:
    """Format a whole switch list, the inverse of :func:`parse_switches`.

    >>> format_switches([["milk", "soy"], ["brand", "Blind Tiger"], ["sugar"]])
    '/milk soy /brand "Blind Tiger" /sugar'
    """
    pieces: list[str] = []
    for switch in switches:
        pieces.extend(_switch_pieces(switch))
    return _join(pieces)
