"""
myshell Shell Module

The interactive read-parse-dispatch-execute loop.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, Sequence, TextIO

from myshell.core.config_loader import ShellConfig, get_config
from myshell.exceptions import BuiltinError
from myshell.logger import get_logger
from .builtins import BuiltinTable, create_builtin_table
from .launcher import ProcessLauncher
from .parser import ArgumentVector, Tokenizer
from .reader import InputLine, LineReader
from .states import Continuation


class Shell:
    """
    myshell interactive interpreter.

    Provides:
    - Unbounded line input
    - Whitespace tokenizing
    - Built-in commands (cd, help, exit)
    - Foreground execution of external programs

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        self._config = config if config is not None else get_config().shell
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self._logger = get_logger('shell')

        self._reader = LineReader(
            stdin,
            self._config.line_buffer_size,
            self._config.line_buffer_step
        )
        self._tokenizer = Tokenizer(
            self._config.token_buffer_size,
            self._config.token_buffer_step
        )
        self._launcher = ProcessLauncher(self)
        self._builtins = create_builtin_table(self)

    @property
    def config(self) -> ShellConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def builtins(self) -> BuiltinTable:
        return self._builtins

    @property
    def launcher(self) -> ProcessLauncher:
        return self._launcher

    def run(self) -> int:
        """
        Run the interactive shell.

        Loops until a command returns Continuation.TERMINATE or, with
        ``exit_on_eof`` set, input runs out.

        Returns:
            Exit status for the interpreter process

        Raises:
            AllocationError: If an input buffer cannot be grown
        """
        self.load_startup_config()

        status = Continuation.CONTINUE
        while status is Continuation.CONTINUE:
            self._show_prompt()

            try:
                line = self.read_line()
            except KeyboardInterrupt:
                self.stdout.write("^C\n")
                continue

            if line.eof and not line.text and self._config.exit_on_eof:
                self.stdout.write("\n")
                self._logger.info("End of input")
                break

            status = self.execute(self.parse_line(line))

        self.shutdown()
        return 0

    def read_line(self) -> InputLine:
        """Read the next line of input."""
        return self._reader.read_line()

    def parse_line(self, line) -> ArgumentVector:
        """Split a line into its argument vector."""
        return self._tokenizer.tokenize(line)

    def execute(self, args: Sequence[str]) -> Continuation:
        """
        Dispatch one command.

        Args:
            args: Argument vector; empty for a blank line

        Returns:
            The command's continuation signal
        """
        if len(args) == 0:
            return Continuation.CONTINUE

        builtin = self._builtins.lookup(args[0])
        if builtin is None:
            return self._launcher.launch(args)

        self._logger.debug(f"Running built-in {builtin.name}")
        try:
            return builtin.execute(args)
        except BuiltinError as e:
            self._logger.warning(str(e))
            self.report_error(e.message)
            return Continuation.CONTINUE

    def report_error(self, message: str) -> None:
        """Write ``<name>: <message>`` to the error stream."""
        err = self.stderr
        err.write(f"{self.name}: {message}\n")
        err.flush()

    def flush(self) -> None:
        """Flush the output streams."""
        self.stdout.flush()
        self.stderr.flush()

    def load_startup_config(self) -> None:
        """Startup hook; the shell has no startup files to read."""
        self._logger.debug(
            "Starting",
            context={'name': self.name, 'builtins': ','.join(self._builtins.names())}
        )

    def shutdown(self) -> None:
        """Shutdown hook; the shell has nothing to release."""
        self._logger.debug("Shutting down")

    def _show_prompt(self) -> None:
        out = self.stdout
        out.write(self._config.prompt)
        out.flush()


def create_shell(
    config: Optional[ShellConfig] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None
) -> Shell:
    """Factory function to create a shell."""
    return Shell(config, stdin, stdout, stderr)
