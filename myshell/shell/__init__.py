"""
myshell Shell Module

Provides the interactive command interpreter:
- Line reading
- Whitespace tokenizing
- Built-in commands
- External program execution
"""

from .states import Continuation, LaunchState
from .reader import InputLine, LineReader, read_line
from .parser import ArgumentVector, Tokenizer, TOKEN_DELIMITERS, parse_line
from .builtins import (
    Builtin,
    BuiltinTable,
    CdCommand,
    ExitCommand,
    HelpCommand,
    create_builtin_table,
)
from .launcher import ChildProcess, ExitOutcome, ProcessLauncher
from .shell import Shell, create_shell

__all__ = [
    'Continuation',
    'LaunchState',
    'InputLine',
    'LineReader',
    'read_line',
    'ArgumentVector',
    'Tokenizer',
    'TOKEN_DELIMITERS',
    'parse_line',
    'Builtin',
    'BuiltinTable',
    'CdCommand',
    'ExitCommand',
    'HelpCommand',
    'create_builtin_table',
    'ChildProcess',
    'ExitOutcome',
    'ProcessLauncher',
    'Shell',
    'create_shell',
]
