"""Text helpers for reading map files: integer parsing, word splitting and line reading."""

from __future__ import annotations

from itertools import takewhile
from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 42

_BLANKS = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading blanks and trailing junk.

    Returns 0 when no digits follow the optional sign.
    """
    rest = text.lstrip(_BLANKS)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_DIGITS.__contains__, rest))
    return sign * int(digits) if digits else 0


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


class LineReader(Generic[AnyStr]):
    """Read a stream line by line through a fixed-size read buffer.

    Each line keeps its trailing newline; the last line may lack one.
    Works with both text and binary streams.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def _read_chunk(self) -> Optional[AnyStr]:
        # A failing read ends the input, just like reaching its end.
        try:
            return self._stream.read(self._buffer_size)
        except (OSError, ValueError):
            return None

    def _has_newline(self) -> bool:
        if self._stash is None:
            return False
        newline = "\n" if isinstance(self._stash, str) else b"\n"
        return newline in self._stash

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while not self._has_newline():
            chunk = self._read_chunk()
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        stash, self._stash = self._stash, None
        if not stash:
            return None
        newline = "\n" if isinstance(stash, str) else b"\n"
        cut = stash.find(newline)
        if cut == -1:
            return stash
        self._stash = stash[cut + 1:]
        return stash[:cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)