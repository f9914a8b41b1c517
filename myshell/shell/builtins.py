"""
Shell Built-in Commands

Implements the commands run inside the interpreter's own process,
and the read-only table the dispatcher looks them up in.

Author: YSNRFD
Version: 1.0.0
"""

import os
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from myshell.exceptions import BuiltinError, MissingArgumentError
from myshell.logger import get_logger
from .states import Continuation


class Builtin(ABC):
    """
    A command executed directly by the shell without creating a
    new process.

    Subclasses set ``name`` and ``summary`` and implement execute().
    """

    name: str = ''
    summary: str = ''

    def __init__(self, shell):
        """
        Initialize the built-in.

        Args:
            shell: The shell instance, used for its output streams
        """
        self._shell = shell
        self._logger = get_logger('builtins')

    @abstractmethod
    def execute(self, args: Sequence[str]) -> Continuation:
        """
        Run the command.

        Args:
            args: Full argument vector, args[0] being the command name

        Returns:
            Whether the interpreter loop should go on
        """


class CdCommand(Builtin):
    """Change the working directory of the shell process."""

    name = 'cd'
    summary = 'Change the current directory'

    def execute(self, args: Sequence[str]) -> Continuation:
        if len(args) < 2:
            raise MissingArgumentError(self.name)

        path = args[1]
        try:
            os.chdir(path)
        except OSError as e:
            raise BuiltinError(
                f"cd: {path}: {e.strerror or e}",
                command=self.name,
                context={'errno': e.errno}
            ) from e
        except ValueError as e:
            # Paths with an embedded NUL never reach the system call.
            raise BuiltinError(
                f"cd: {path!r}: {e}",
                command=self.name
            ) from e

        self._logger.debug("Changed directory", context={'path': path})
        return Continuation.CONTINUE


class HelpCommand(Builtin):
    """List the built-in commands."""

    name = 'help'
    summary = 'Display this help'

    def execute(self, args: Sequence[str]) -> Continuation:
        out = self._shell.stdout
        out.write(f"{self._shell.name} - a minimal command interpreter\n")
        out.write("Type a program name and its arguments, then press enter.\n")
        out.write("The following commands are built in:\n")
        for builtin in self._shell.builtins:
            out.write(f"  {builtin.name:<8}{builtin.summary}\n")
        out.write("Use the man command for information on other programs.\n")
        out.flush()
        return Continuation.CONTINUE


class ExitCommand(Builtin):
    """Leave the interpreter."""

    name = 'exit'
    summary = 'Exit the shell'

    def execute(self, args: Sequence[str]) -> Continuation:
        return Continuation.TERMINATE


class BuiltinTable:
    """
    Ordered, read-only mapping from command name to Builtin.

    Built once per shell; names must be unique.

    Example:
        >>> table = BuiltinTable([CdCommand(shell), ExitCommand(shell)])
        >>> table.names()
        ('cd', 'exit')
    """

    def __init__(self, builtins: Iterable[Builtin]):
        commands: dict[str, Builtin] = {}
        for builtin in builtins:
            if builtin.name in commands:
                raise ValueError(f"Duplicate built-in command: {builtin.name}")
            commands[builtin.name] = builtin
        self._commands: Mapping[str, Builtin] = MappingProxyType(commands)

    def names(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def lookup(self, name: str) -> Optional[Builtin]:
        """Return the built-in registered under ``name``, if any."""
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Builtin]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)


BUILTIN_CLASSES: tuple[type[Builtin], ...] = (CdCommand, HelpCommand, ExitCommand)


def create_builtin_table(shell) -> BuiltinTable:
    """Build the standard table of built-ins bound to ``shell``."""
    return BuiltinTable(cls(shell) for cls in BUILTIN_CLASSES)
