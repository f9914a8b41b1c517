"""
Line Reader Module

Reads one line of user input of any length.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from myshell.exceptions import AllocationError
from myshell.logger import get_logger


DEFAULT_LINE_CAPACITY = 1024
DEFAULT_LINE_STEP = 1024


def _escape_undecodable(stream: TextIO) -> None:
    """
    Switch a strict text stream to surrogateescape decoding.

    Bytes that are not valid in the stream encoding then come back as
    lone surrogates, which os.fsencode() turns into the original bytes
    when they reach chdir() or exec().
    """
    if getattr(stream, 'errors', None) != 'strict':
        return
    reconfigure = getattr(stream, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(errors='surrogateescape')


@dataclass(frozen=True)
class InputLine:
    """One line of input, without its trailing newline."""
    text: str
    capacity: int
    eof: bool = False

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


class LineReader:
    """
    Reads lines character by character from a text stream.

    The buffer starts at a fixed capacity and grows by a fixed step
    each time it fills up, so there is no limit on line length.

    Example:
        >>> reader = LineReader(io.StringIO("ls -l\\n"))
        >>> reader.read_line().text
        'ls -l'
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        initial_capacity: int = DEFAULT_LINE_CAPACITY,
        step: int = DEFAULT_LINE_STEP
    ):
        if initial_capacity < 1 or step < 1:
            raise ValueError("buffer capacity and step must be positive")
        self._stream = stream
        self._initial_capacity = initial_capacity
        self._step = step
        self._logger = get_logger('reader')

    @property
    def stream(self) -> TextIO:
        stream = self._stream if self._stream is not None else sys.stdin
        _escape_undecodable(stream)
        return stream

    def read_line(self) -> InputLine:
        """
        Read characters up to a newline or end of stream.

        Returns:
            The line read. ``eof`` is set when the stream ended before
            a newline was seen.

        Raises:
            AllocationError: If the buffer cannot be grown
        """
        stream = self.stream
        capacity = self._initial_capacity
        buffer = self._allocate(capacity)
        position = 0

        while True:
            char = stream.read(1)

            if not char:
                return InputLine(''.join(buffer[:position]), capacity, eof=True)
            if char == '\n':
                return InputLine(''.join(buffer[:position]), capacity)

            buffer[position] = char
            position += 1

            # Keep one free slot past the last character.
            if position >= capacity:
                capacity += self._step
                self._grow(buffer, capacity)

    def _allocate(self, capacity: int) -> list[str]:
        try:
            return [''] * capacity
        except MemoryError:
            raise AllocationError("Cannot allocate line buffer", size=capacity) from None

    def _grow(self, buffer: list[str], capacity: int) -> None:
        self._logger.debug("Growing line buffer", context={'capacity': capacity})
        try:
            buffer.extend([''] * (capacity - len(buffer)))
        except MemoryError:
            raise AllocationError("Cannot grow line buffer", size=capacity) from None


def read_line(
    stream: Optional[TextIO] = None,
    initial_capacity: int = DEFAULT_LINE_CAPACITY,
    step: int = DEFAULT_LINE_STEP
) -> InputLine:
    """Read a single line from ``stream`` (standard input by default)."""
    return LineReader(stream, initial_capacity, step).read_line()
