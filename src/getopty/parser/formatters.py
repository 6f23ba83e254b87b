from __future__ import annotations

import os
import textwrap

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from getopty.parser.results import ParseError
    from getopty.parser.spec import OptionSpec


class DiagnosticFormatter:
    """
    Format parse errors and usage lines for the user.

    Instance attributes:
      prog : string
        the program name; a path is reduced to its basename.  Leave it
        empty to format bare messages.
      width : int
        total number of columns for output (pass None to constructor for
        this value to be taken from the $COLUMNS environment variable)
      metavar : string
        placeholder printed for option values, "VALUE" by default
      _long_opt_fmt : str
        format string for long options with values; either "%s=%s"
        ("--file=VALUE") or "%s %s" ("--file VALUE")
    """

    def __init__(
        self,
        prog: str | None = None,
        width: int | None = None,
        metavar: str = "VALUE",
    ) -> None:
        self.prog: str = os.path.basename(prog) if prog else ""
        if width is None:
            try:
                width = int(os.environ["COLUMNS"])
            except (KeyError, ValueError):
                width = 80
            width -= 2
        self.width: int = max(width, 20)
        self.metavar = metavar
        self._long_opt_fmt: str = "%s=%s"

    def set_long_opt_delimiter(self, delim: str) -> None:
        if delim not in ("=", " "):
            raise ValueError(f"invalid metavar delimiter for long options: {delim!r}")
        self._long_opt_fmt = "%s" + delim + "%s"

    def format_error(self, error: ParseError) -> str:
        if self.prog:
            return f"{self.prog}: {error}"
        return str(error)

    def format_usage(self, spec: OptionSpec) -> str:
        """
        Render a one-paragraph synopsis of 'spec', eg.

          Usage: prog [-ab] [-c VALUE] [--foo] [--bar=VALUE] [--] [ARGUMENT...]
        """
        words = [self.prog] if self.prog else []
        words.extend(self.format_option_strings(spec))
        words.extend(["[--]", "[ARGUMENT...]"])

        # Keep each bracketed group on one line.
        placeholder = "\0"
        text = " ".join(word.replace(" ", placeholder) for word in words)
        lines = textwrap.wrap(
            text,
            self.width,
            initial_indent="Usage: ",
            subsequent_indent=" " * 7,
            break_on_hyphens=False,
        )
        return "\n".join(line.replace(placeholder, " ") for line in lines) + "\n"

    def format_option_strings(self, spec: OptionSpec) -> list[str]:
        """Return the bracketed synopsis groups for every option in 'spec'."""
        flags = "".join(ch for ch, takes in spec.short_flags.items() if not takes)
        result = [f"[-{flags}]"] if flags else []
        result.extend(
            f"[-{ch} {self.metavar}]"
            for ch, takes in spec.short_flags.items()
            if takes
        )
        for name in sorted(spec.long_flags):
            if spec.long_requires_value(name):
                result.append("[%s]" % (self._long_opt_fmt % (f"--{name}", self.metavar)))
            else:
                result.append(f"[--{name}]")
        return result
