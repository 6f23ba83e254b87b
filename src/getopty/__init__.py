"""
getopty: POSIX short options and GNU long options, classified lazily.

    >>> from getopty import OptionSpec, parse
    >>> spec = OptionSpec.build("ab:", ["foo"], ["foo"])
    >>> [str(r) for r in parse(["-abx", "--foo=1", "file"], spec)]
    ["option '-a'", "option '-b'", "option '--foo'", "arguments ['file']"]
"""

from __future__ import annotations

from getopty.parser.api import Parsed
from getopty.parser.api import collect
from getopty.parser.api import getopts
from getopty.parser.api import parse
from getopty.parser.api import strict
from getopty.parser.errors import BadOptionError
from getopty.parser.errors import OptionConflictError
from getopty.parser.errors import OptionSpecError
from getopty.parser.errors import OptParseError
from getopty.parser.formatters import DiagnosticFormatter
from getopty.parser.results import Arguments
from getopty.parser.results import ErrorKind
from getopty.parser.results import LongOption
from getopty.parser.results import ParseError
from getopty.parser.results import ParseResult
from getopty.parser.results import ShortOption
from getopty.parser.scanner import OptionScanner
from getopty.parser.sources import ArgvTokenSource
from getopty.parser.sources import ListTokenSource
from getopty.parser.sources import TokenSource
from getopty.parser.spec import OptionSpec


__version__ = "0.1.0"

__all__ = [
    "Arguments",
    "ArgvTokenSource",
    "BadOptionError",
    "DiagnosticFormatter",
    "ErrorKind",
    "ListTokenSource",
    "LongOption",
    "OptParseError",
    "OptionConflictError",
    "OptionScanner",
    "OptionSpec",
    "OptionSpecError",
    "ParseError",
    "ParseResult",
    "Parsed",
    "ShortOption",
    "TokenSource",
    "collect",
    "getopts",
    "parse",
    "strict",
]
