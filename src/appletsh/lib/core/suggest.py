"""Suggestion primitive used for Tab completion."""

import difflib
from collections.abc import Iterable


def complete(candidates: Iterable[str], text: str) -> str:
    """Return the best completion of *text* among *candidates*.

    Candidates starting with *text* win, shortest first (ties broken
    alphabetically), so an exact match completes to itself.  Otherwise the
    closest spelling according to ``difflib`` is used.  When nothing fits,
    *text* comes back unchanged.
    """
    if not text:
        return text
    names = sorted(set(candidates))
    prefixed = [name for name in names if name.startswith(text)]
    if prefixed:
        return min(prefixed, key=len)
    close = difflib.get_close_matches(text, names, n=1)
    return close[0] if close else text
