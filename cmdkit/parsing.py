"""Iterative flag parsing that splits combined short options such as ``-it``."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol

__all__ = [
    "PROVIDED_BUT_NOT_DEFINED_ERR_MSG",
    "FlagParseError",
    "FlagSetLike",
    "flag_from_error",
    "is_splittable",
    "split_short_options",
    "parse_iter",
]

PROVIDED_BUT_NOT_DEFINED_ERR_MSG = "flag provided but not defined: -"


class FlagParseError(Exception):
    """Raised by a flag set when the arguments cannot be parsed."""


class FlagSetLike(Protocol):
    """What :func:`parse_iter` needs from a flag set."""

    def parse(self, args: Sequence[str]) -> None:
        """Parse ``args``, raising :class:`FlagParseError` on failure."""

    def lookup(self, name: str) -> Any:
        """Return the flag called ``name``, or None if there is none."""


def flag_from_error(error: BaseException | str) -> str:
    """Return the flag name named by an "undefined flag" error.

    Raises ValueError if the error is not of that kind.
    """
    message = str(error)
    if not message.startswith(PROVIDED_BUT_NOT_DEFINED_ERR_MSG):
        raise ValueError(f"not an undefined-flag error: {message}")
    return message[len(PROVIDED_BUT_NOT_DEFINED_ERR_MSG):]


def is_splittable(flag_arg: str) -> bool:
    """True for a single-dash argument holding more than one character."""
    return (
        flag_arg.startswith("-")
        and not flag_arg.startswith("--")
        and len(flag_arg) > 2
    )


def split_short_options(lookup: Callable[[str], Any], arg: str) -> list[str]:
    """Split ``-abc`` into ``-a -b -c`` when every letter is a known flag.

    ``lookup`` returns the flag for a name, or None. If the argument cannot be
    split it is returned alone in the list.
    """
    if not is_splittable(arg) or any(lookup(c) is None for c in arg[1:]):
        return [arg]
    return [f"-{c}" for c in arg[1:]]


def parse_iter(
    flag_set: FlagSetLike,
    args: Sequence[str],
    short_option_handling: bool = False,
    shell_complete: bool = False,
) -> None:
    """Parse ``args`` with ``flag_set``, retrying with combined short options split.

    With ``shell_complete`` set, a parse failure that cannot be repaired by
    splitting is ignored, since completion input may be incomplete.
    """
    args = list(args)
    while True:
        try:
            flag_set.parse(args)
        except FlagParseError as err:
            if not short_option_handling:
                if shell_complete:
                    return None
                raise
            try:
                trimmed = flag_from_error(err)
            except ValueError:
                raise err from None

            for i, arg in enumerate(args):
                if arg.lstrip("-") != trimmed:
                    continue
                short_opts = split_short_options(flag_set.lookup, arg)
                if len(short_opts) == 1:
                    raise
                # Arguments before this one were already applied; replaying
                # them would duplicate values of slice flags.
                args = short_opts + args[i + 1:]
                break
            else:
                raise
        else:
            return None