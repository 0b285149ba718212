"""Name canonicalization for parsed switches and hunks."""

from __future__ import annotations

from collections.abc import Mapping


def canonicalize_names(
    entries: list[list[str]],
    aliases: Mapping[str, str] | None = None,
) -> None:
    """Rewrite the name of every switch or hunk in *entries* in place.

    Each name is fold-cased with :meth:`str.casefold`.  If *aliases* has an
    entry for the fold-cased name, its value is used instead.  Arguments and
    values are never touched.

    Examples
    --------
    >>> switches = [["URGENCY", "high"], ["Note", "Call Bob"]]
    >>> canonicalize_names(switches, {"urgency": "priority"})
    >>> switches
    [['priority', 'high'], ['note', 'Call Bob']]
    """
    if aliases is None:
        aliases = {}
    for entry in entries:
        if not entry:
            continue
        folded = entry[0].casefold()
        alias = aliases.get(folded)
        entry[0] = folded if alias is None else alias
