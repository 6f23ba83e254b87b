from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Iterable
from typing import Mapping

from getopty.parser.errors import OptionConflictError
from getopty.parser.errors import OptionSpecError


@dataclass(frozen=True)
class OptionSpec:
    """
    The options a scan recognizes.

    Attributes:
      short_flags : { char : bool }
        single option characters, in declaration order, mapped to
        whether the option requires a value
      long_flags : frozenset[str]
        recognized long option names, without the leading "--"
      long_flags_with_value : frozenset[str]
        the long names that require a value; always a subset of
        long_flags

    Specs are immutable; build one per set of options and share it
    between scans freely.
    """

    short_flags: Mapping[str, bool] = field(default_factory=dict)
    long_flags: frozenset[str] = frozenset()
    long_flags_with_value: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        short_flags = {ch: bool(value) for ch, value in self.short_flags.items()}
        for ch in short_flags:
            _check_short_opt(ch)

        long_flags = frozenset(self.long_flags)
        long_flags_with_value = frozenset(self.long_flags_with_value)
        for name in long_flags | long_flags_with_value:
            _check_long_opt(name)

        missing = long_flags_with_value - long_flags
        if missing:
            raise OptionSpecError(
                "long options requiring a value must also be declared "
                f"as long options: {', '.join(sorted(missing))}"
            )

        object.__setattr__(self, "short_flags", MappingProxyType(short_flags))
        object.__setattr__(self, "long_flags", long_flags)
        object.__setattr__(self, "long_flags_with_value", long_flags_with_value)

    @classmethod
    def build(
        cls,
        shortopts: str = "",
        longopts: Iterable[str] = (),
        longopts_with_arg: Iterable[str] = (),
    ) -> OptionSpec:
        """
        Build a spec from getopt-style option strings.

        'shortopts' lists the option characters; a character followed
        by ":" requires a value, eg. "ab:" declares -a and -b, and -b
        takes a value.
        """
        long_flags: list[str] = []
        for name in longopts:
            if name in long_flags:
                raise OptionConflictError("declared twice", f"--{name}")
            long_flags.append(name)

        return cls(
            short_flags=parse_shortopts(shortopts),
            long_flags=frozenset(long_flags),
            long_flags_with_value=frozenset(longopts_with_arg),
        )

    def has_short(self, ch: str) -> bool:
        return ch in self.short_flags

    def short_requires_value(self, ch: str) -> bool:
        return self.short_flags.get(ch, False)

    def has_long(self, name: str) -> bool:
        return name in self.long_flags

    def long_requires_value(self, name: str) -> bool:
        return name in self.long_flags_with_value


def parse_shortopts(shortopts: str) -> dict[str, bool]:
    """
    parse_shortopts(shortopts : string) -> { char : bool }

    Turn a getopt short option string into an ordered mapping of
    option character to "requires value".
    """
    flags: dict[str, bool] = {}
    last: str | None = None
    for ch in shortopts:
        if ch == ":":
            if last is None or flags[last]:
                raise OptionSpecError(
                    f"invalid short option string {shortopts!r}: "
                    "':' must follow an option character"
                )
            flags[last] = True
            continue

        _check_short_opt(ch)
        if ch in flags:
            raise OptionConflictError("declared twice", f"-{ch}")
        flags[ch] = False
        last = ch

    return flags


def _check_short_opt(ch: str) -> None:
    if len(ch) != 1:
        raise OptionSpecError(
            f"invalid short option {ch!r}: must be a single character"
        )
    if ch in "-:" or ch.isspace():
        raise OptionSpecError(
            f"invalid short option {ch!r}: "
            "must not be '-', ':' or whitespace"
        )


def _check_long_opt(name: str) -> None:
    if not name:
        raise OptionSpecError("long option names must not be empty")
    if name.startswith("-"):
        raise OptionSpecError(
            "must be given without the leading '--'", f"--{name.lstrip('-')}"
        )
    if "=" in name:
        raise OptionSpecError("must not contain '='", f"--{name}")
