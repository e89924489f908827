"""Sources that a flag value can be looked up from: environment and files."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "ValueSource",
    "EnvVarValueSource",
    "FileValueSource",
    "ValueSourceChain",
    "env_var",
    "env_vars",
    "file",
    "files",
]


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class ValueSource(ABC):
    """Something a value may be looked up from."""

    @abstractmethod
    def lookup(self) -> str | None:
        """Return the value, or None if the source has none."""


@dataclass(frozen=True)
class EnvVarValueSource(ValueSource):
    """A value held in an environment variable."""

    key: str

    def lookup(self) -> str | None:
        return os.environ.get(self.key.strip())

    def __str__(self) -> str:
        return f"environment variable {_quote(self.key)}"


@dataclass(frozen=True)
class FileValueSource(ValueSource):
    """A value held as the whole contents of a file."""

    path: str

    def lookup(self) -> str | None:
        try:
            data = Path(self.path).read_bytes()
        except OSError:
            return None
        return data.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return f"file {_quote(self.path)}"


@dataclass
class ValueSourceChain(ValueSource):
    """An ordered series of sources; the first one that has a value wins."""

    chain: list[ValueSource] = field(default_factory=list)

    def append(self, other: ValueSourceChain) -> None:
        """Add the sources of another chain to the end of this one."""
        self.chain.extend(other.chain)

    def env_keys(self) -> list[str]:
        """Names of the environment variables in the chain, in order."""
        return [src.key for src in self.chain if isinstance(src, EnvVarValueSource)]

    def lookup(self) -> str | None:
        found = self.lookup_with_source()
        return None if found is None else found[0]

    def lookup_with_source(self) -> tuple[str, ValueSource] | None:
        """Return the first value found together with its source, or None."""
        for src in self.chain:
            value = src.lookup()
            if value is not None:
                return value, src
        return None

    def __iter__(self):
        return iter(self.chain)

    def __len__(self) -> int:
        return len(self.chain)

    def __str__(self) -> str:
        return ",".join(str(src) for src in self.chain)


def env_var(key: str) -> EnvVarValueSource:
    """A source reading the environment variable ``key``."""
    return EnvVarValueSource(key)


def env_vars(*args: str) -> ValueSourceChain:
    """A chain of environment variable sources, one per key, in order."""
    return ValueSourceChain([EnvVarValueSource(key) for key in args])


def file(path: str) -> FileValueSource:
    """A source reading the file at ``path``."""
    return FileValueSource(path)


def files(*args: str) -> ValueSourceChain:
    """A chain of file sources, one per path, in order."""
    return ValueSourceChain([FileValueSource(path) for path in args])