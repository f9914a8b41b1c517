"""
Command Parser Module

Splits an input line into the argument vector of a command.

Only whitespace splitting is done: no quotes, escapes, pipes,
redirections or variable expansion.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from myshell.exceptions import AllocationError
from myshell.logger import get_logger
from .reader import InputLine


# Space, tab, carriage return, newline and bell.
TOKEN_DELIMITERS = frozenset(' \t\r\n\a')

DEFAULT_TOKEN_CAPACITY = 64
DEFAULT_TOKEN_STEP = 64


@dataclass(frozen=True)
class ArgumentVector:
    """
    The tokens of one command line.

    Tokens are owned copies of the line's text. Index 0, when present,
    is the command name; an empty vector is a blank line.
    """
    tokens: tuple[str, ...] = ()
    capacity: int = DEFAULT_TOKEN_CAPACITY

    @property
    def command(self) -> Optional[str]:
        return self.tokens[0] if self.tokens else None

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index):
        return self.tokens[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)


class Tokenizer:
    """
    Splits lines on runs of TOKEN_DELIMITERS.

    Example:
        >>> Tokenizer().tokenize("  cd   /tmp  ").tokens
        ('cd', '/tmp')
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_TOKEN_CAPACITY,
        step: int = DEFAULT_TOKEN_STEP
    ):
        if initial_capacity < 1 or step < 1:
            raise ValueError("token capacity and step must be positive")
        self._initial_capacity = initial_capacity
        self._step = step
        self._logger = get_logger('parser')

    def tokenize(self, line: Union[InputLine, str]) -> ArgumentVector:
        """
        Tokenize a line.

        Args:
            line: An InputLine or plain string

        Returns:
            ArgumentVector of the tokens in order of appearance

        Raises:
            AllocationError: If the token buffer cannot be grown
        """
        text = line.text if isinstance(line, InputLine) else line
        capacity = self._initial_capacity
        tokens = self._allocate(capacity)
        count = 0
        start = None

        for index, char in enumerate(text):
            if char in TOKEN_DELIMITERS:
                if start is not None:
                    count, capacity = self._store(tokens, count, capacity, text[start:index])
                    start = None
            elif start is None:
                start = index

        if start is not None:
            count, capacity = self._store(tokens, count, capacity, text[start:])

        return ArgumentVector(tuple(tokens[:count]), capacity)

    def _store(
        self,
        tokens: list[Optional[str]],
        count: int,
        capacity: int,
        token: str
    ) -> tuple[int, int]:
        tokens[count] = token
        count += 1

        # Keep room for the end-of-vector slot.
        if count >= capacity:
            capacity += self._step
            self._grow(tokens, capacity)

        return count, capacity

    def _allocate(self, capacity: int) -> list[Optional[str]]:
        try:
            return [None] * capacity
        except MemoryError:
            raise AllocationError("Cannot allocate token buffer", size=capacity) from None

    def _grow(self, tokens: list[Optional[str]], capacity: int) -> None:
        self._logger.debug("Growing token buffer", context={'capacity': capacity})
        try:
            tokens.extend([None] * (capacity - len(tokens)))
        except MemoryError:
            raise AllocationError("Cannot grow token buffer", size=capacity) from None


def parse_line(
    line: Union[InputLine, str],
    initial_capacity: int = DEFAULT_TOKEN_CAPACITY,
    step: int = DEFAULT_TOKEN_STEP
) -> ArgumentVector:
    """Split ``line`` into an ArgumentVector."""
    return Tokenizer(initial_capacity, step).tokenize(line)
