from __future__ import annotations

import logging
import sys

from typing import TYPE_CHECKING
from typing import ClassVar
from typing import TextIO

from getopty.parser.api import parse
from getopty.parser.api import strict
from getopty.parser.errors import BadOptionError
from getopty.parser.errors import OptionSpecError
from getopty.parser.formatters import DiagnosticFormatter
from getopty.parser.results import Arguments
from getopty.parser.results import ParseError
from getopty.parser.sources import ArgvTokenSource
from getopty.parser.spec import OptionSpec


if TYPE_CHECKING:
    from getopty.parser.results import ParseResult
    from getopty.parser.sources import TokenSource


logger = logging.getLogger(__name__)


OPTIONS_HELP = """\
Classify TOKENs against the options given by -s, -l and -L.
Put "--" before the tokens if any of them starts with "-".

Options:
  -h, --help              show this help message and exit
  -v, --verbose           log each classification step to stderr
  -s, --short=SHORTOPTS   short options, getopt style ("ab:" for -a and -b VALUE)
  -l, --long=NAME         accept the long option --NAME
  -L, --long-arg=NAME     accept the long option --NAME=VALUE
"""


class ClassifyCommand:
    name: ClassVar[str] = "getopty"
    spec: ClassVar[OptionSpec] = OptionSpec.build(
        "hvs:l:L:",
        ["help", "verbose", "short", "long", "long-arg"],
        ["short", "long", "long-arg"],
    )

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self.shortopts = ""
        self.longopts: list[str] = []
        self.longopts_with_arg: list[str] = []
        self.verbose = False
        self.tokens: list[str] = []

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def execute(self, source: TokenSource) -> int:
        try:
            return self.handle(source)
        except KeyboardInterrupt:
            return 1

    def handle(self, source: TokenSource) -> int:
        try:
            prog = source.program_name() or self.name
        except IndexError:
            prog = self.name
        formatter = DiagnosticFormatter(prog)

        try:
            for result in strict(parse(source.arguments(), self.spec)):
                if self._take_option(result):
                    self.stdout.write(formatter.format_usage(self.spec))
                    self.stdout.write("\n" + OPTIONS_HELP)
                    return 0
        except BadOptionError as err:
            return self.usage_error(formatter, formatter.format_error(err.result))

        logging.basicConfig(
            level=logging.DEBUG if self.verbose else logging.WARNING,
            stream=self.stderr,
        )

        longopts = self.longopts + [
            name for name in self.longopts_with_arg if name not in self.longopts
        ]
        try:
            spec = OptionSpec.build(self.shortopts, longopts, self.longopts_with_arg)
        except OptionSpecError as err:
            return self.usage_error(formatter, f"{formatter.prog}: {err}")

        logger.debug("classifying %d tokens", len(self.tokens))
        status = 0
        for result in parse(self.tokens, spec):
            if isinstance(result, ParseError):
                self.stderr.write(formatter.format_error(result) + "\n")
                status = 1
            else:
                self.stdout.write(render(result) + "\n")
        return status

    def usage_error(self, formatter: DiagnosticFormatter, message: str) -> int:
        self.stderr.write(message + "\n")
        self.stderr.write(formatter.format_usage(self.spec))
        return 2

    def _take_option(self, result: ParseResult) -> bool:
        """Apply one of our own options; return True if help was requested."""
        if isinstance(result, Arguments):
            self.tokens = list(result.items)
            return False

        name = result.name
        if name in ("h", "help"):
            return True
        if name in ("v", "verbose"):
            self.verbose = True
        elif name in ("s", "short"):
            self.shortopts = result.value
        elif name in ("l", "long"):
            self.longopts.append(result.value)
        elif name in ("L", "long-arg"):
            self.longopts_with_arg.append(result.value)
        return False


def render(result: ParseResult) -> str:
    value = getattr(result, "value", "")
    if value:
        return f"{result} with value {value!r}"
    return str(result)


def main(source: TokenSource | None = None) -> int:
    return ClassifyCommand().execute(source or ArgvTokenSource())
