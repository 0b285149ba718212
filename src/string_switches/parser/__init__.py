"""Parser package — switch and colonstring parsers over a shared quote scanner."""

from string_switches.parser.colonstrings import (
    IDENTIFIER_RE,
    Fallback,
    Remaining,
    literal_fallback,
    match_colonstring,
    parse_colonstrings,
    skip_fallback,
)
from string_switches.parser.quoting import (
    CLOSE_QUOTES,
    OPEN_QUOTES,
    QUOTE_CHARS,
    consume_quoted,
)
from string_switches.parser.switches import (
    COMMAND_CHARS,
    group_tokens,
    parse_switches,
    tokenize_switches,
)

__all__ = [
    "parse_switches",
    "tokenize_switches",
    "group_tokens",
    "parse_colonstrings",
    "match_colonstring",
    "literal_fallback",
    "skip_fallback",
    "consume_quoted",
    "Fallback",
    "Remaining",
    "COMMAND_CHARS",
    "IDENTIFIER_RE",
    "OPEN_QUOTES",
    "CLOSE_QUOTES",
    "QUOTE_CHARS",
]
