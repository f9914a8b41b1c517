"""
Shell States Module

Defines the continuation signal returned by every command and the
lifecycle states of one external command launch.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum, auto


class Continuation(Enum):
    """Result of executing one command line."""

    CONTINUE = auto()
    """Read and run the next line."""

    TERMINATE = auto()
    """Leave the interpreter loop."""


class LaunchState(Enum):
    """
    States of a single external command launch.

    State transitions:
        CREATING -> CHILD_RUNNING: fork() succeeded
        CREATING -> CREATE_FAILED: fork() failed, nothing to wait for
        CHILD_RUNNING -> CHILD_REPLACED: parent starts waiting on the new image
        CHILD_REPLACED -> CHILD_EXITED: child exited (also after a failed exec)
        CHILD_REPLACED -> CHILD_SIGNALED: child was killed by a signal
    """

    CREATING = auto()
    CHILD_RUNNING = auto()
    CHILD_REPLACED = auto()
    CHILD_EXITED = auto()
    CHILD_SIGNALED = auto()
    CREATE_FAILED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (
            LaunchState.CHILD_EXITED,
            LaunchState.CHILD_SIGNALED,
            LaunchState.CREATE_FAILED,
        )
