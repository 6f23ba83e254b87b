from __future__ import annotations

import logging

from collections import deque
from typing import Iterator
from typing import Sequence

from getopty.parser.results import Arguments
from getopty.parser.results import ErrorKind
from getopty.parser.results import LongOption
from getopty.parser.results import ParseError
from getopty.parser.results import ParseResult
from getopty.parser.results import ShortOption
from getopty.parser.spec import OptionSpec


logger = logging.getLogger(__name__)


class OptionScanner:
    """
    Classify command-line tokens against an OptionSpec, left to right.

    The scanner is an iterator: each step classifies as many tokens as
    needed to produce the next result.  Options and errors come out in
    token order; positional arguments are collected along the way and
    yielded once, as a single Arguments result, after the last token.

    Instance attributes:
      tokens : [string]
        the tokens being scanned (program path excluded)
      spec : OptionSpec
        the recognized options
      index : int
        position of the next token to classify
      seen_terminator : bool
        true once a bare "--" was seen; every later token is positional
      skip_next : bool
        true if the next token was already consumed as a short
        option's value
      largs : [string]
        positional arguments collected so far

    A scanner is not restartable.  Scan a token list again with a fresh
    scanner.
    """

    def __init__(self, tokens: Sequence[str], spec: OptionSpec) -> None:
        self.tokens: list[str] = list(tokens)  # don't keep caller's list
        self.spec = spec
        self.index = 0
        self.seen_terminator = False
        self.skip_next = False
        self.largs: list[str] = []
        self._pending: deque[ParseResult] = deque()
        self._done = False

    def __iter__(self) -> Iterator[ParseResult]:
        return self

    def __next__(self) -> ParseResult:
        while not self._pending:
            if self.index < len(self.tokens):
                self._process_token()
                self.index += 1
            elif self._done:
                raise StopIteration
            else:
                self._done = True
                logger.debug(
                    "scanned %d tokens, %d positional", len(self.tokens), len(self.largs)
                )
                if self.largs:
                    return Arguments(self.largs)

        return self._pending.popleft()

    def _process_token(self) -> None:
        arg = self.tokens[self.index]

        if self.skip_next:
            self.skip_next = False
        elif self.seen_terminator:
            self.largs.append(arg)
        elif arg == "--":
            logger.debug("option terminator at token %d", self.index)
            self.seen_terminator = True
        elif arg[0:2] == "--":
            self._process_long_opt(arg)
        elif arg[:1] == "-" and len(arg) > 1:
            self._process_short_opts(arg)
        else:
            # bare "-" falls through here as well
            self.largs.append(arg)

    def _process_long_opt(self, arg: str) -> None:
        idx = arg.find("=", 2)
        if idx == 2:
            # "--=" and "--=value" have no name at all
            self._error(ErrorKind.INVALID_OPTION, arg)
            return

        if idx > 2:
            opt, value = arg[2:idx], arg[idx + 1 :]
            if not self.spec.has_long(opt):
                self._error(ErrorKind.INVALID_OPTION, opt)
            elif not self.spec.long_requires_value(opt):
                self._error(ErrorKind.UNEXPECTED_ARGUMENT, opt)
            else:
                self._emit(LongOption(opt, value))
            return

        opt = arg[2:]
        if not self.spec.has_long(opt):
            self._error(ErrorKind.INVALID_OPTION, opt)
        elif self.spec.long_requires_value(opt):
            # long values are only ever taken from "--name=value"
            self._error(ErrorKind.REQUIRES_ARGUMENT, opt)
        else:
            self._emit(LongOption(opt))

    def _process_short_opts(self, arg: str) -> None:
        last = len(arg) - 1
        for i in range(1, len(arg)):
            ch = arg[i]

            if not self.spec.has_short(ch):
                self._error(ErrorKind.INVALID_OPTION, ch)
            elif not self.spec.short_requires_value(ch):
                self._emit(ShortOption(ch))
            elif i < last:
                # Characters left in arg are the value, not more options.
                self._emit(ShortOption(ch, arg[i + 1 :]))
                break
            elif self.index + 1 < len(self.tokens):
                self.skip_next = True
                self._emit(ShortOption(ch, self.tokens[self.index + 1]))
            else:
                self._error(ErrorKind.REQUIRES_ARGUMENT, ch)

    def _emit(self, result: ParseResult) -> None:
        self._pending.append(result)

    def _error(self, kind: ErrorKind, text: str) -> None:
        logger.debug("token %d: %s %r", self.index, kind.value, text)
        self._pending.append(ParseError(kind, text))
