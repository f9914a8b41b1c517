"""
Shell Exceptions

Base exception for myshell and the errors raised by the line reader,
tokenizer and built-in commands.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all myshell errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        recoverable: Whether the interpreter may keep running
        context: Additional context about the error

    Example:
        >>> raise ShellException("Shell failure", error_code=1001)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        recoverable: bool = True,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.recoverable = recoverable
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code}, "
            f"recoverable={self.recoverable})"
        )


class AllocationError(ShellException):
    """
    An input or token buffer could not be grown.

    This is the one fatal error of the interpreter: it is not handled
    where it occurs but propagates out of the main loop, which reports
    it and exits with a failure status.

    Example:
        >>> raise AllocationError("Cannot grow line buffer", size=2048)
    """

    def __init__(
        self,
        message: str,
        size: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if size is not None:
            ctx["size"] = size
        super().__init__(
            message=message,
            error_code=3001,
            recoverable=False,
            context=ctx
        )
        self.size = size


class BuiltinError(ShellException):
    """A built-in command could not carry out its action."""

    def __init__(
        self,
        message: str,
        command: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["command"] = command
        super().__init__(
            message=message,
            error_code=error_code or 4000,
            context=ctx
        )
        self.command = command


class MissingArgumentError(BuiltinError):
    """
    A built-in was called without a required argument.

    Example:
        >>> raise MissingArgumentError("cd")
    """

    def __init__(self, command: str) -> None:
        super().__init__(
            message=f'expected argument to "{command}"',
            command=command,
            error_code=4001
        )
