"""Similarity scoring and "did you mean" suggestions for flags and commands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "DEFAULT_HELP_NAMES",
    "SUGGEST_DID_YOU_MEAN_TEMPLATE",
    "HELP_NAME",
    "HELP_ALIAS",
    "jaro_distance",
    "jaro_winkler",
    "suggest_flag",
    "suggest_command",
    "did_you_mean",
]

HELP_NAME = "help"
HELP_ALIAS = "h"
DEFAULT_HELP_NAMES: tuple[str, ...] = (HELP_NAME, HELP_ALIAS)
SUGGEST_DID_YOU_MEAN_TEMPLATE = "Did you mean {}?"

_BOOST_THRESHOLD = 0.7
_PREFIX_SIZE = 4


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _names_of(item: Any) -> list[str]:
    """Names of a flag or command: a string, a sequence, or an object with ``names``."""
    names = getattr(item, "names", item)
    if callable(names):
        names = names()
    if isinstance(names, str):
        return [names]
    return list(names)


def jaro_distance(a: str, b: str) -> float:
    """Jaro similarity of two strings: 1.0 for identical, 0.0 for nothing in common."""
    x, y = a.encode("utf-8"), b.encode("utf-8")
    if not x and not y:
        return 1.0
    if not x or not y:
        return 0.0

    max_distance = max(0, max(len(x), len(y)) // 2 - 1)
    matched_x = [False] * len(x)
    matched_y = [False] * len(y)

    matches = 0
    for i, byte in enumerate(x):
        start = max(0, i - max_distance)
        end = min(len(y) - 1, i + max_distance)
        for j in range(start, end + 1):
            if not matched_y[j] and y[j] == byte:
                matched_x[i] = True
                matched_y[j] = True
                matches += 1
                break
    if matches == 0:
        return 0.0

    in_x = [c for c, hit in zip(x, matched_x) if hit]
    in_y = [c for c, hit in zip(y, matched_y) if hit]
    transpositions = sum(p != q for p, q in zip(in_x, in_y)) / 2

    m = float(matches)
    return ((m / len(x)) + (m / len(y)) + ((m - transpositions) / m)) / 3.0


def jaro_winkler(a: str, b: str) -> float:
    """Jaro similarity boosted for strings sharing a common prefix."""
    distance = jaro_distance(a, b)
    if distance <= _BOOST_THRESHOLD:
        return distance

    x, y = a.encode("utf-8"), b.encode("utf-8")
    prefix = min(len(x), _PREFIX_SIZE, len(y))
    prefix_match = 0.0
    for p, q in zip(x[:prefix], y[:prefix]):
        if p != q:
            break
        prefix_match += 1
    return distance + 0.1 * prefix_match * (1.0 - distance)


def _best_match(candidates: Iterable[str], provided: str) -> str:
    best_distance = 0.0
    suggestion = ""
    for name in candidates:
        score = jaro_winkler(name, provided)
        if score > best_distance:
            best_distance = score
            suggestion = name
    return suggestion


def suggest_flag(
    flags: Iterable[Any],
    provided: str,
    hide_help: bool = False,
    help_names: Sequence[str] | None = DEFAULT_HELP_NAMES,
) -> str:
    """Return the closest flag name, prefixed with ``-`` or ``--``, or ``""``.

    Unless ``hide_help`` is set, the help flag's names are candidates as well;
    pass ``help_names=None`` when there is no help flag.
    """
    extra = list(help_names) if (not hide_help and help_names) else []

    def candidates() -> Iterable[str]:
        for flag in flags:
            yield from _names_of(flag)
            yield from extra

    suggestion = _best_match(candidates(), provided)
    width = len(suggestion.encode("utf-8"))
    if width == 1:
        return "-" + suggestion
    if width > 1:
        return "--" + suggestion
    return suggestion


def suggest_command(commands: Iterable[Any], provided: str) -> str:
    """Return the closest command name (help included), or ``""``."""

    def candidates() -> Iterable[str]:
        for command in commands:
            yield from _names_of(command)
            yield HELP_NAME
            yield HELP_ALIAS

    return _best_match(candidates(), provided)


def did_you_mean(suggestion: str) -> str:
    """Format a suggestion as a "Did you mean ...?" sentence."""
    return SUGGEST_DID_YOU_MEAN_TEMPLATE.format(_quote(suggestion))