"""
myshell Exception Hierarchy

All custom exceptions inherit from ShellException.

Architecture:
    ShellException (Base)
    ├── AllocationError
    ├── BuiltinError
    │   └── MissingArgumentError
    └── ProcessException
        ├── ForkError
        └── ExecError
"""

from .shell_exceptions import (
    ShellException,
    AllocationError,
    BuiltinError,
    MissingArgumentError,
)

from .process_exceptions import (
    ProcessException,
    ForkError,
    ExecError,
)

__all__ = [
    "ShellException",
    "AllocationError",
    "BuiltinError",
    "MissingArgumentError",
    "ProcessException",
    "ForkError",
    "ExecError",
]
