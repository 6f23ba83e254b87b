from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Iterable
from typing import Iterator
from typing import Sequence

from getopty.parser.errors import BadOptionError
from getopty.parser.results import Arguments
from getopty.parser.results import LongOption
from getopty.parser.results import ParseError
from getopty.parser.results import ParseResult
from getopty.parser.results import ShortOption
from getopty.parser.scanner import OptionScanner
from getopty.parser.sources import ArgvTokenSource
from getopty.parser.sources import TokenSource
from getopty.parser.spec import OptionSpec


def parse(tokens: Sequence[str], spec: OptionSpec) -> OptionScanner:
    """
    Classify 'tokens' (program path excluded) against 'spec'.

    Returns a lazy iterator of ParseResult.  Malformed tokens show up
    as ParseError results in the stream; nothing is raised.
    """
    return OptionScanner(tokens, spec)


def getopts(
    shortopts: str = "",
    longopts: Iterable[str] = (),
    longopts_with_arg: Iterable[str] = (),
    *,
    source: TokenSource | None = None,
) -> OptionScanner:
    """
    getopts(shortopts : string, longopts : [string],
            longopts_with_arg : [string], source : TokenSource = argv)
    -> iterator of ParseResult

    Scan the program's command line (default: sys.argv[1:]) for the
    given options.  'shortopts' uses the getopt convention, eg. "ab:"
    for -a and -b, where -b requires a value; every name in
    'longopts_with_arg' must also be listed in 'longopts'.

    Raises OptionSpecError if the option strings are invalid.
    """
    spec = OptionSpec.build(shortopts, longopts, longopts_with_arg)
    if source is None:
        source = ArgvTokenSource()
    return parse(source.arguments(), spec)


@dataclass
class Parsed:
    options: list[ShortOption | LongOption] = field(default_factory=list)
    arguments: list[str] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def collect(results: Iterable[ParseResult]) -> Parsed:
    """Drain 'results', keeping every option, argument and error."""
    parsed = Parsed()
    for result in results:
        if isinstance(result, ParseError):
            parsed.errors.append(result)
        elif isinstance(result, Arguments):
            parsed.arguments.extend(result.items)
        else:
            parsed.options.append(result)
    return parsed


def strict(results: Iterable[ParseResult]) -> Iterator[ParseResult]:
    """
    Pass 'results' through, raising BadOptionError at the first
    ParseError.
    """
    for result in results:
        if isinstance(result, ParseError):
            raise BadOptionError(result)
        yield result
