"""A small command-line option parser with long, short and multi-value options."""

from __future__ import annotations

import enum
import sys
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


class CmdOptionType(enum.Enum):
    """How many values an option takes."""

    NO_VALUE = "no_value"
    SINGLE_VALUE = "single_value"
    MULTI_VALUE = "multi_value"


def _full_name_of(token: str) -> Optional[str]:
    if len(token) > 2 and token.startswith("--"):
        return token[2:]
    return None


def _short_name_of(token: str) -> Optional[str]:
    if len(token) == 2 and token[0] == "-" and token[1].isascii() and token[1].isalpha():
        return token[1]
    return None


def _looks_like_option(token: str) -> bool:
    return _full_name_of(token) is not None or _short_name_of(token) is not None


class Option:
    """Base class of all options; ``settled`` is true once the option was seen."""

    type: CmdOptionType
    has_value: bool

    def __init__(self, desc: str) -> None:
        self.desc = desc
        self.settled = False
        self.full_name: Optional[str] = None
        self.short_name: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(full_name={self.full_name!r}, "
            f"short_name={self.short_name!r}, settled={self.settled})"
        )


class OptionNoValue(Option):
    """A flag that takes no value."""

    type = CmdOptionType.NO_VALUE
    has_value = False

    def set(self) -> bool:
        self.settled = True
        return True


class OptionSingleValue(Option):
    """An option followed by exactly one value."""

    type = CmdOptionType.SINGLE_VALUE
    has_value = True

    def __init__(self, desc: str) -> None:
        super().__init__(desc)
        self.value = ""

    def set_value(self, value: str) -> None:
        self.value = value
        self.settled = True

    def get_value(self, converter: Callable[[str], T] = str) -> T:
        """Return the value passed through ``converter``."""
        return converter(self.value)


class OptionMultiValue(Option):
    """An option followed by any number of values."""

    type = CmdOptionType.MULTI_VALUE
    has_value = True

    def __init__(self, desc: str) -> None:
        super().__init__(desc)
        self.values: list[str] = []

    def add_value(self, value: str) -> None:
        self.values.append(value)
        self.settled = True

    def get_value_at(self, index: int, converter: Callable[[str], T] = str) -> T:
        """Return the value at ``index`` passed through ``converter``."""
        return converter(self.values[index])


_OPTION_CLASSES: dict[CmdOptionType, type[Option]] = {
    CmdOptionType.NO_VALUE: OptionNoValue,
    CmdOptionType.SINGLE_VALUE: OptionSingleValue,
    CmdOptionType.MULTI_VALUE: OptionMultiValue,
}

_HELP_TOKENS = frozenset({"-h", "-help", "-?"})


class CommandLine:
    """Registry of options and a parser for an argument vector."""

    def __init__(
        self,
        exit_when_error_input: bool = False,
        error_input_exit_code: int = 1,
        help_message_func: Optional[Callable[[], None]] = None,
    ) -> None:
        self.exit_when_error_input = exit_when_error_input
        self.error_input_exit_code = error_input_exit_code
        self.help_message_func = help_message_func
        self._invalid_input: list[str] = []
        self._options: list[Option] = []
        self._by_full_name: dict[str, Option] = {}
        self._by_short_name: dict[str, Option] = {}

    @property
    def invalid_input(self) -> list[str]:
        """Arguments of the last parse that matched no option."""
        return list(self._invalid_input)

    @property
    def options(self) -> list[Option]:
        return list(self._options)

    def add_option(
        self,
        option_type: CmdOptionType,
        desc: str,
        full_name: Optional[str] = None,
        short_name: Optional[str] = None,
    ) -> Option:
        """Register an option and return it."""
        if full_name is None and short_name is None:
            raise ValueError("an option needs a full name, a short name or both")
        if short_name is not None and len(short_name) != 1:
            raise ValueError(f"short name must be a single character: {short_name!r}")
        if full_name is not None and full_name in self._by_full_name:
            raise ValueError(f"Command line duplicate full name option: {full_name}")
        if short_name is not None and short_name in self._by_short_name:
            raise ValueError(f"Command line duplicate short name option: {short_name}")

        option = _OPTION_CLASSES[CmdOptionType(option_type)](desc)
        option.full_name = full_name
        option.short_name = short_name

        self._options.append(option)
        if full_name is not None:
            self._by_full_name[full_name] = option
        if short_name is not None:
            self._by_short_name[short_name] = option
        return option

    def parse(self, argv: Optional[list[str]] = None) -> None:
        """Parse ``argv``, whose first element is the program name."""
        args = list(sys.argv if argv is None else argv)

        if len(args) <= 1 or (len(args) == 2 and args[1] in _HELP_TOKENS):
            self.print_help_message()
            sys.exit(0)

        self._invalid_input = []
        rest = args[1:]
        index = 0

        while index < len(rest):
            token = rest[index]
            index += 1

            full_name = _full_name_of(token)
            short_name = _short_name_of(token) if full_name is None else None
            if full_name is not None:
                key, table = full_name, self._by_full_name
            elif short_name is not None:
                key, table = short_name, self._by_short_name
            else:
                self._invalid_input.append(token)
                continue

            option = table.get(key)
            if option is None:
                if self.exit_when_error_input:
                    print(f"Invalid option: {key}")
                    sys.exit(self.error_input_exit_code)
                self._invalid_input.append(token)
                continue

            index = self._consume(option, rest, index)

    @staticmethod
    def _consume(option: Option, rest: list[str], index: int) -> int:
        if isinstance(option, OptionNoValue):
            option.set()
        elif isinstance(option, OptionSingleValue):
            if index < len(rest):
                option.set_value(rest[index])
                index += 1
        elif isinstance(option, OptionMultiValue):
            while index < len(rest) and not _looks_like_option(rest[index]):
                option.add_value(rest[index])
                index += 1
        return index

    def print_help_message(self) -> None:
        """Print the help text, through the custom function when one is set."""
        if self.help_message_func is not None:
            self.help_message_func()
            return

        lines = ["Options"]
        for option in self._options:
            names = ", ".join(
                name for name in (option.full_name, option.short_name) if name is not None
            )
            lines.append(f"\t{names}\t\t{option.desc}")
        sys.stdout.write("\n".join(lines) + "\n")