from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ErrorKind(Enum):
    INVALID_OPTION = "invalid_option"
    REQUIRES_ARGUMENT = "requires_argument"
    UNEXPECTED_ARGUMENT = "unexpected_argument"


class ParseResult:
    """
    Base class of everything a scan yields.

    Consumers dispatch on the concrete class: ShortOption, LongOption,
    Arguments or ParseError.  Each carries only its own fields.
    """

    __slots__ = ()


@dataclass(frozen=True)
class ShortOption(ParseResult):
    name: str
    value: str = ""

    def __str__(self) -> str:
        return f"option '-{self.name}'"


@dataclass(frozen=True)
class LongOption(ParseResult):
    name: str
    value: str = ""

    def __str__(self) -> str:
        return f"option '--{self.name}'"


@dataclass(frozen=True)
class Arguments(ParseResult):
    items: tuple[str, ...] = ()

    def __init__(self, items: Iterable[str] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def __str__(self) -> str:
        return f"arguments {list(self.items)}"


_ERROR_FORMATS: dict[ErrorKind, str] = {
    ErrorKind.INVALID_OPTION: "invalid option -- '{}'",
    ErrorKind.REQUIRES_ARGUMENT: "option requires an argument -- '{}'",
    ErrorKind.UNEXPECTED_ARGUMENT: "option '--{}' doesn't allow an argument",
}


@dataclass(frozen=True)
class ParseError(ParseResult):
    kind: ErrorKind
    offending_text: str

    def __str__(self) -> str:
        return _ERROR_FORMATS[self.kind].format(self.offending_text)
