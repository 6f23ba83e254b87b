from __future__ import annotations

import sys

from abc import ABC
from abc import abstractmethod
from typing import Sequence


class TokenSource(ABC):
    """
    Where command-line tokens come from.

    Index 0 is the program path; 1 through count() are the arguments.
    """

    @abstractmethod
    def count(self) -> int:
        """Number of arguments, program path excluded."""
        raise NotImplementedError

    @abstractmethod
    def at(self, index: int) -> str:
        raise NotImplementedError

    def arguments(self) -> list[str]:
        return [self.at(i) for i in range(1, self.count() + 1)]

    def program_name(self) -> str:
        return self.at(0)


class ArgvTokenSource(TokenSource):
    """Tokens from the process argument vector, read at call time."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        self._argv = argv

    @property
    def argv(self) -> Sequence[str]:
        if self._argv is None:
            return sys.argv
        return self._argv

    def count(self) -> int:
        return max(len(self.argv) - 1, 0)

    def at(self, index: int) -> str:
        argv = self.argv
        if not 0 <= index < len(argv):
            raise IndexError(f"token index out of range: {index}")
        return argv[index]


class ListTokenSource(ArgvTokenSource):
    """A synthetic argument list, for tests and embedding."""

    def __init__(self, args: Sequence[str], program: str = "testprog") -> None:
        super().__init__([program, *args])
