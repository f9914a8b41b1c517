"""
myshell - a minimal interactive command interpreter

Reads a line, splits it on whitespace, and runs either a built-in
command or an external program, until told to exit.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .shell.shell import Shell, create_shell
from .shell.states import Continuation

__all__ = [
    'Shell',
    'create_shell',
    'Continuation',
]
