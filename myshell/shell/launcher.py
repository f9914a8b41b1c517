"""
Process Launcher Module

Runs external programs: fork a child, replace its image with the
requested program, and block until the child exits or is killed.

Author: YSNRFD
Version: 1.0.0
"""

import os
import signal
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, Sequence

from myshell.exceptions import ExecError, ForkError
from myshell.logger import get_logger
from .states import Continuation, LaunchState


# Exit status of a child whose exec() failed.
EXEC_FAILURE_STATUS = 1


@contextmanager
def _interrupts_ignored():
    """Ignore SIGINT in the interpreter while a foreground child runs."""
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(
            signal.SIGINT,
            previous if previous is not None else signal.SIG_DFL
        )


@dataclass(frozen=True)
class ExitOutcome:
    """How a child process ended."""
    pid: int
    state: LaunchState
    exit_code: Optional[int] = None
    signal: Optional[int] = None

    @property
    def returncode(self) -> int:
        """Shell-style status: the exit code, or 128 + signal number."""
        if self.state is LaunchState.CHILD_SIGNALED:
            return 128 + (self.signal or 0)
        return self.exit_code or 0


class ChildProcess:
    """
    Handle on a forked child, valid until it has been reaped.

    Example:
        >>> child = ChildProcess(pid, 'sleep')
        >>> outcome = child.wait_for_exit_or_signal()
    """

    def __init__(self, pid: int, program: str):
        self.pid = pid
        self.program = program
        self.state = LaunchState.CHILD_RUNNING
        self.outcome: Optional[ExitOutcome] = None
        self._logger = get_logger('launcher')

    @property
    def reaped(self) -> bool:
        return self.outcome is not None

    def wait_for_exit_or_signal(self) -> ExitOutcome:
        """
        Block until the child exits or is terminated by a signal.

        A child that is merely stopped is reported but waited on
        again; only exit or death by signal ends the wait.

        Returns:
            ExitOutcome of the reaped child
        """
        if self.outcome is not None:
            return self.outcome

        self.state = LaunchState.CHILD_REPLACED

        while True:
            _, status = os.waitpid(self.pid, os.WUNTRACED)

            if os.WIFEXITED(status):
                self.outcome = ExitOutcome(
                    pid=self.pid,
                    state=LaunchState.CHILD_EXITED,
                    exit_code=os.WEXITSTATUS(status),
                )
                break

            if os.WIFSIGNALED(status):
                self.outcome = ExitOutcome(
                    pid=self.pid,
                    state=LaunchState.CHILD_SIGNALED,
                    signal=os.WTERMSIG(status),
                )
                break

            if os.WIFSTOPPED(status):
                self._logger.info(
                    "Child stopped, still waiting",
                    pid=self.pid,
                    context={'signal': os.WSTOPSIG(status)}
                )

        self.state = self.outcome.state
        return self.outcome


class ProcessLauncher:
    """
    Launches one external command at a time and waits for it.

    External failures never stop the interpreter: launch() always
    returns Continuation.CONTINUE.
    """

    def __init__(self, shell):
        """
        Initialize the launcher.

        Args:
            shell: The shell instance, used for its name and streams
        """
        self._shell = shell
        self._logger = get_logger('launcher')
        self.state: Optional[LaunchState] = None
        self.last_outcome: Optional[ExitOutcome] = None

    def launch(self, args: Sequence[str]) -> Continuation:
        """
        Run ``args[0]`` with ``args`` as its argument list and wait.

        Args:
            args: Argument vector; args[0] names the program

        Returns:
            Continuation.CONTINUE
        """
        if len(args) == 0:
            return Continuation.CONTINUE

        self.state = LaunchState.CREATING
        self.last_outcome = None

        with _interrupts_ignored():
            try:
                child = self.spawn(args)
            except ForkError as e:
                self.state = LaunchState.CREATE_FAILED
                self._logger.error(f"fork failed: {e.message}", context={'program': args[0]})
                self._shell.report_error(e.message)
                return Continuation.CONTINUE

            self.state = child.state
            outcome = child.wait_for_exit_or_signal()

        self.state = outcome.state
        self.last_outcome = outcome

        self._logger.debug(
            f"{child.program} finished",
            pid=child.pid,
            context={'state': outcome.state.name, 'returncode': outcome.returncode}
        )
        return Continuation.CONTINUE

    def spawn(self, args: Sequence[str]) -> ChildProcess:
        """
        Fork a child that replaces itself with ``args[0]``.

        Returns:
            ChildProcess handle for the parent to wait on

        Raises:
            ForkError: If the child process cannot be created
        """
        argv = list(args)

        # Anything still buffered would otherwise be written twice.
        self._shell.flush()

        try:
            pid = os.fork()
        except OSError as e:
            raise ForkError(e.strerror or str(e), parent_pid=os.getpid()) from e

        if pid == 0:
            self._replace_image(argv)

        self._logger.debug("Forked child", pid=pid, context={'program': argv[0]})
        return ChildProcess(pid, argv[0])

    def _replace_image(self, argv: list[str]) -> None:
        """Child side: exec the program or exit; never returns."""
        try:
            # The parent ignores SIGINT while waiting; exec keeps ignored signals.
            signal.signal(signal.SIGINT, signal.SIG_DFL)
            os.execvp(argv[0], argv)
        except OSError as e:
            error = ExecError(e.strerror or str(e), pid=os.getpid(), program=argv[0])
        except BaseException as e:
            # Nothing may unwind back into the interpreter loop.
            error = ExecError(str(e), pid=os.getpid(), program=argv[0])

        message = f"{self._shell.name}: {argv[0]}: {error.message}\n"
        try:
            os.write(2, message.encode(errors='surrogateescape'))
        finally:
            os._exit(EXEC_FAILURE_STATUS)
