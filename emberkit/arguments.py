"""Command-line parsing with a main command, subcommands and options.

An argument count (``require``) is either fixed (``require >= 0``) or a
minimum: ``-1`` means at least zero arguments, ``-2`` at least one, and so
on.  :func:`require_args_at_least` builds such values.
"""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import takewhile

Callback = Callable[["Commander", list[str]], object]


class ArgumentsError(ValueError):
    """Raised when arguments do not fit a command or a callback rejects them."""


def require_args_at_least(number: int) -> int:
    """Return the ``require`` value meaning "at least ``number`` arguments"."""
    if number < 0:
        raise ValueError("number must not be negative")
    return -number - 1


def callback_fail(command: Commander, args: list[str]) -> bool:
    """A callback that always rejects, so the help text is shown."""
    return False


@dataclass
class Option:
    """An optional flag of a command and the number of arguments it takes."""

    name: str
    require: int
    description: str = ""
    callback: Callback | None = None


def _help_lines(entries: list[tuple[str, str]]) -> str:
    width = max([3, *(len(name) for name, _ in entries)])
    return "".join(
        f"\t{name.ljust(width + 1)}: {description}\n" for name, description in entries
    )


class Commander:
    """One command: its own arguments, its options and the callbacks to run.

    Callbacks receive the command and their arguments and return a true
    value to go on; a false value stops the run.
    """

    def __init__(
        self,
        name: str,
        require: int,
        description: str = "",
        callback: Callback | None = None,
    ) -> None:
        self.name = name
        self.require = require
        self.description = description
        self.callback = callback
        self.usage = ""
        self.options: list[Option] = []
        self._option_args: dict[str, list[str]] = {}
        self._command_args: list[str] = []

    @property
    def args(self) -> list[str]:
        """The command's own arguments from the last run."""
        return list(self._command_args)

    def option(
        self,
        name: str,
        require: int,
        description: str = "",
        callback: Callback | None = None,
    ) -> Commander:
        """Register an optional flag; returns the command for chaining."""
        if self._find(name) is not None:
            raise ValueError(f"option {name!r} is already registered")
        self.options.append(Option(name, require, description, callback))
        return self

    def option_args(self, name: str) -> list[str]:
        """Arguments given to an option; empty when absent or argument-less."""
        return list(self._option_args.get(name, []))

    def has_option(self, name: str) -> bool:
        """Whether the option appeared in the last run."""
        return name in self._option_args

    def build_help(self) -> str:
        """Help text from the usage line, the description and the options."""
        text = ""
        if self.usage:
            text += self.usage + "\n"
        if self.description:
            text += self.description + "\n"
        if not self.options:
            return text
        text += "\noptions:\n"
        text += _help_lines([(o.name, o.description) for o in self.options])
        return text

    def execute(self, args: Sequence[str]) -> None:
        """Sort out the arguments, then run option callbacks and the command callback."""
        self._build_args(args)
        for name, values in self._option_args.items():
            option = self._find(name)
            if option is not None and option.callback is not None:
                if not option.callback(self, list(values)):
                    raise ArgumentsError(f"option {name!r} was rejected")
        if self.callback is not None and not self.callback(self, list(self._command_args)):
            raise ArgumentsError(f"command {self.name!r} was rejected")

    def _find(self, name: str) -> Option | None:
        return next((option for option in self.options if option.name == name), None)

    def _take(self, pending: deque[str], require: int) -> list[str] | None:
        """Take the arguments ``require`` asks for from the front, or None if they don't fit."""
        if require < 0:
            least = -require - 1
            require = sum(1 for _ in takewhile(lambda t: self._find(t) is None, pending))
            if require < least:
                return None
        if len(pending) < require:
            return None
        taken = [pending.popleft() for _ in range(require)]
        if any(self._find(token) is not None for token in taken):
            return None
        return taken

    def _build_args(self, args: Sequence[str]) -> None:
        self._option_args = {}
        self._command_args = []
        pending = deque(args)
        positional: list[str] = []
        while pending:
            token = pending.popleft()
            option = self._find(token)
            if option is None:
                positional.append(token)
                continue
            values = self._take(pending, option.require)
            if values is None:
                raise ArgumentsError(f"wrong arguments for option {token!r}")
            self._option_args.setdefault(token, values)
        command_args = self._take(deque(positional), self.require)
        if command_args is None:
            raise ArgumentsError(f"wrong arguments for command {self.name!r}")
        self._command_args = command_args


class Arguments:
    """The parser: a main command plus mutually exclusive subcommands."""

    def __init__(
        self,
        require: int,
        description: str = "",
        callback: Callback | None = None,
    ) -> None:
        self.main_command = Commander("", require, description, callback)
        self.subcommands: list[Commander] = []
        self.application = ""

    def subcommand(
        self,
        name: str,
        require: int,
        description: str = "",
        callback: Callback | None = None,
    ) -> Commander:
        """Register a subcommand and return it for adding options."""
        command = Commander(name, require, description, callback)
        self.subcommands.append(command)
        return command

    def parse(self, argv: Sequence[str] | None = None) -> bool:
        """Run the command line (program name first); print help and return False on failure."""
        tokens = list(sys.argv if argv is None else argv)
        self.application = tokens[0] if tokens else ""
        args = tokens[1:]
        command = self._find_subcommand(args)
        if command is None:
            command = self.main_command
        else:
            args = args[args.index(command.name) + 1:]
        try:
            command.execute(args)
        except ArgumentsError:
            print(self.build_help(command))
            return False
        return True

    def build_help(self, command: Commander | None = None) -> str:
        """Help for a command; the main command's help also lists the subcommands."""
        command = self.main_command if command is None else command
        text = command.build_help()
        if command is not self.main_command or not self.subcommands:
            return text
        text += "\nsubcommands:\n"
        text += _help_lines([(c.name, c.description) for c in self.subcommands])
        return text

    def _find_subcommand(self, args: list[str]) -> Commander | None:
        for token in args:
            for command in self.subcommands:
                if command.name == token:
                    return command
        return None