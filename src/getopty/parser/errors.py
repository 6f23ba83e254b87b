from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from getopty.parser.results import ParseError


class OptParseError(Exception):
    def __init__(self, msg: str) -> None:
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class OptionSpecError(OptParseError):
    """
    Raised if an OptionSpec is built from invalid or inconsistent
    option strings.
    """

    def __init__(self, msg: str, option: str = "") -> None:
        self.msg = msg
        self.option = option

    def __str__(self) -> str:
        if self.option:
            return f"option {self.option}: {self.msg}"
        return self.msg


class OptionConflictError(OptionSpecError):
    """
    Raised if the same option is declared twice in an OptionSpec.
    """


class BadOptionError(OptParseError):
    """
    Raised by strict consumption when a parse error is seen on the
    command line.
    """

    def __init__(self, result: ParseError) -> None:
        self.result = result
        self.msg = str(result)
