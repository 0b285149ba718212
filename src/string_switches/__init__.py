"""Parse ``/switches`` and ``key:value`` strings into structured lists.

Typical use::

    from string_switches import parse_switches

    switches, err = parse_switches(user_input)
    if err:
        raise SystemExit(err)
    for name, *args in switches:
        print(f"/{name} = {args}")
"""

from string_switches.canonical import canonicalize_names
from string_switches.errors import FormatError, OptionsError, SwitchesError, SwitchSyntaxError
from string_switches.formatter import format_switch, format_switches, quote_argument
from string_switches.parser import (
    Fallback,
    Remaining,
    literal_fallback,
    parse_colonstrings,
    parse_switches,
    skip_fallback,
)

__all__ = [
    "parse_switches",
    "parse_colonstrings",
    "canonicalize_names",
    "format_switch",
    "format_switches",
    "quote_argument",
    "literal_fallback",
    "skip_fallback",
    "Fallback",
    "Remaining",
    "SwitchesError",
    "SwitchSyntaxError",
    "OptionsError",
    "FormatError",
]
