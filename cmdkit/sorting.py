"""Case-aware alphabetical ordering of strings."""

from __future__ import annotations

from itertools import zip_longest

__all__ = ["lexicographic_less"]


def lexicographic_less(i: str, j: str) -> bool:
    """Return True if ``i`` sorts before ``j``.

    Characters are compared case-insensitively first; where they differ only
    in case, the one with the lower code point wins. If one string is a
    prefix of the other, plain string ordering decides.
    """
    for ir, jr in zip_longest(i, j):
        if ir is None or jr is None:
            break
        lower_i, lower_j = ir.lower(), jr.lower()
        if lower_i != lower_j:
            return lower_i < lower_j
        if ir != jr:
            return ir < jr
    return i < j