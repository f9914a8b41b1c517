"""
Process Exceptions

Exceptions raised while creating an external program's process or
replacing its image.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class ProcessException(ShellException):
    """
    Base exception for all process-related errors.

    Attributes:
        message: Human-readable error description
        pid: Process ID associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        pid: Optional[int] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if pid is not None:
            ctx["pid"] = pid
        super().__init__(
            message=message,
            error_code=error_code or 2000,
            context=ctx
        )
        self.pid = pid

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.pid is not None:
            base = f"{base} (pid={self.pid})"
        return base


class ForkError(ProcessException):
    """
    Error during fork() system call.

    Common causes include:
    - Process limit exceeded
    - Memory allocation failure for child process

    Example:
        >>> raise ForkError("Resource temporarily unavailable", parent_pid=1)
    """

    def __init__(
        self,
        message: str,
        parent_pid: int,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            pid=parent_pid,
            error_code=2005,
            context=context
        )
        self.parent_pid = parent_pid


class ExecError(ProcessException):
    """
    Error during exec() system call.

    Only ever raised inside a child process, which reports it and
    exits without returning to the interpreter loop.

    Example:
        >>> raise ExecError("No such file or directory", pid=42, program="nosuch")
    """

    def __init__(
        self,
        message: str,
        pid: int,
        program: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if program:
            ctx["program"] = program
        super().__init__(
            message=message,
            pid=pid,
            error_code=2006,
            context=ctx
        )
        self.program = program
