"""
Classify patterns as glob masks or literal paths.
"""

from __future__ import annotations

from itertools import islice

import bracex

_WILDCARDS = frozenset("*?")

# `?(` and `*(` are already caught as wildcards.
_EXTGLOB_PREFIXES = frozenset("+@!")


def split_branches(pattern: str, limit: int | None = None) -> list[str]:
    """
    Expand brace groups in `pattern` into its alternative branches, stopping
    after `limit` branches when given.

    A pattern without brace alternation (including a lone `{x}`) yields
    itself as the only branch.
    """
    branches = bracex.iexpand(pattern, keep_escapes=True, limit=0)
    return list(islice(branches, limit))


def is_mask(pattern: str | None) -> bool:
    """
    Return True if `pattern` has glob semantics rather than naming one path.

    That is: it expands to several branches (`{a,b}`, `{1..3}`), or its
    single branch holds an unescaped wildcard, a closed character class or
    an extglob group. Escapes, lone parentheses and unclosed brackets are
    literal text, so `Copy (2).txt` is a path. Empty and `None` patterns are
    never masks.
    """
    if not pattern:
        return False

    branches = split_branches(pattern, limit=2)
    if len(branches) > 1:
        return True

    return _has_glob_token(branches[0])


def _has_glob_token(branch: str) -> bool:
    i = 0
    while i < len(branch):
        char = branch[i]
        if char == "\\":
            i += 2
            continue
        if char in _WILDCARDS:
            return True
        if char == "[" and _find_closer(branch, i + 2, "]") is not None:
            return True
        if (
            char in _EXTGLOB_PREFIXES
            and branch[i + 1 : i + 2] == "("
            and _find_closer(branch, i + 2, ")") is not None
        ):
            return True
        i += 1
    return False


def _find_closer(branch: str, start: int, closer: str) -> int | None:
    """
    Index of the first unescaped `closer` at or after `start` within the
    current path segment, or None.
    """
    i = start
    while i < len(branch):
        char = branch[i]
        if char == "\\":
            i += 2
            continue
        if char == "/":
            return None
        if char == closer:
            return i
        i += 1
    return None
