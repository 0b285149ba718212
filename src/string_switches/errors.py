"""Custom exception hierarchy for string-switches."""

from __future__ import annotations


class SwitchesError(Exception):
    """Base exception for all string-switches errors."""


class SwitchSyntaxError(SwitchesError, ValueError):
    """Malformed switch input (bad /command, stray slash, orphan text, etc.).

    Raised inside the switch tokenizer and grouper.  :func:`parse_switches`
    converts it to an ``(None, message)`` result, so callers of the public
    parser never see it.
    """


class OptionsError(SwitchesError, ValueError):
    """Conflicting or unusable options passed to the colonstring parser."""


class FormatError(SwitchesError, ValueError):
    """A switch list that cannot be rendered back into parseable text."""
