"""Text helpers for help output and shell completion suggestions."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence
from typing import Any, TextIO

__all__ = [
    "MAX_LINE_LENGTH",
    "GENERATE_SHELL_COMPLETION_FLAG",
    "subtract",
    "indent",
    "nindent",
    "wrap",
    "wrap_line",
    "offset",
    "offset_commands",
    "cli_arg_contains",
    "print_command_suggestions",
    "print_flag_suggestions",
    "check_shell_complete_flag",
]

MAX_LINE_LENGTH = 10000
GENERATE_SHELL_COMPLETION_FLAG = "--generate-shell-completion"


def _names_of(item: Any) -> list[str]:
    names = getattr(item, "names", item)
    if callable(names):
        names = names()
    if isinstance(names, str):
        return [names]
    return list(names)


def _is_zsh(shell: str | None) -> bool:
    if shell is None:
        shell = os.environ.get("SHELL", "")
    return shell.endswith("zsh")


def subtract(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def indent(spaces: int, text: str) -> str:
    """Prefix every line of ``text`` with ``spaces`` spaces."""
    pad = " " * spaces
    return pad + text.replace("\n", "\n" + pad)


def nindent(spaces: int, text: str) -> str:
    """Like :func:`indent`, preceded by a newline."""
    return "\n" + indent(spaces, text)


def wrap(text: str, offset: int, wrap_at: int = MAX_LINE_LENGTH) -> str:
    """Wrap each line of ``text`` at ``wrap_at`` columns, indenting by ``offset``.

    The first line is not indented, since it follows text already printed.
    """
    padding = " " * offset
    out = []
    for i, line in enumerate(text.split("\n")):
        if not line:
            out.append(line)
            continue
        wrapped = wrap_line(line, offset, wrap_at, padding)
        out.append(wrapped if i == 0 else padding + wrapped)
    return "\n".join(out)


def wrap_line(text: str, offset: int, wrap_at: int, padding: str) -> str:
    """Wrap a single line into words fitting ``wrap_at - offset`` columns."""
    if wrap_at <= offset or len(text) <= wrap_at - offset:
        return text

    line_width = wrap_at - offset
    words = text.split()
    if not words:
        return text

    wrapped = words[0]
    space_left = line_width - len(wrapped)
    for word in words[1:]:
        if len(word) + 1 > space_left:
            wrapped += "\n" + padding + word
            space_left = line_width - len(word)
        else:
            wrapped += " " + word
            space_left -= 1 + len(word)
    return wrapped


def offset(text: str, fixed: int) -> int:
    """Width of ``text`` plus ``fixed``."""
    return len(text) + fixed


def offset_commands(commands: Iterable[Any], fixed: int) -> int:
    """Width of the widest ``"name, alias"`` column of ``commands`` plus ``fixed``."""
    widest = max((len(", ".join(_names_of(cmd))) for cmd in commands), default=0)
    return widest + fixed


def cli_arg_contains(flag_name: str, argv: Sequence[str] | None = None) -> bool:
    """True if any comma-separated name of the flag already appears in ``argv``."""
    if argv is None:
        argv = sys.argv
    for name in flag_name.split(","):
        name = name.strip()
        dashes = "-" * min(len(name), 2)
        if f"{dashes}{name}" in argv:
            return True
    return False


def print_command_suggestions(
    commands: Iterable[Any], writer: TextIO, shell: str | None = None
) -> None:
    """Write the names of visible commands, with usage under zsh.

    ``shell`` defaults to the ``SHELL`` environment variable.
    """
    zsh = _is_zsh(shell)
    for command in commands:
        if getattr(command, "hidden", False):
            continue
        if zsh:
            writer.write(f"{command.name}:{getattr(command, 'usage', '')}\n")
        else:
            writer.write(f"{command.name}\n")


def print_flag_suggestions(
    last_arg: str,
    flags: Iterable[Any],
    writer: TextIO,
    argv: Sequence[str] | None = None,
    shell: str | None = None,
) -> None:
    """Write the flags that complete ``last_arg`` and are not yet in ``argv``."""
    zsh = _is_zsh(shell)
    cur = last_arg.removeprefix("-").removeprefix("-")
    for flag in flags:
        if getattr(flag, "hidden", False):
            continue
        usage = getattr(flag, "usage", "") or ""
        name = _names_of(flag)[0].strip()
        count = min(len(name), 2)
        if last_arg.startswith("--") and count == 1:
            continue
        if name.startswith(cur) and cur != name and not cli_arg_contains(name, argv):
            completion = "-" * count + name
            if usage and zsh:
                completion = f"{completion}:{usage}"
            writer.write(completion + "\n")


def check_shell_complete_flag(
    enabled: bool, arguments: Sequence[str]
) -> tuple[bool, list[str]]:
    """Detect a trailing completion request and strip it from ``arguments``.

    Completion is off when not ``enabled`` or when ``--`` appears anywhere.
    """
    arguments = list(arguments)
    if not enabled or not arguments:
        return False, arguments
    if arguments[-1] != GENERATE_SHELL_COMPLETION_FLAG:
        return False, arguments
    if "--" in arguments:
        return False, arguments
    return True, arguments[:-1]