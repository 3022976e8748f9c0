"""
Character cursor with position tracking and single-step pushback.

The cursor is the only place where reader state changes. Every grammar
construct in the parser peeks one character and un-peeks it before
dispatching, so the one-level pushback is the whole of the lookahead.
"""

import io
from typing import Final
from typing import Protocol

from ._errors import IllegalCursorState
from ._errors import Position
from ._errors import UnexpectedEof

EOF: Final = ""
BLANK_LIMIT: Final = " "


class CharSource(Protocol):
    """Anything that hands out text one read at a time."""

    def read(self, size: int = -1, /) -> str: ...


class Cursor:
    """
    Delivers characters from a text source while tracking position.

    Reads are unbuffered: each character costs one `read(1)` call on the
    source, so slow sources should be wrapped by the caller.
    """

    def __init__(self, source: CharSource) -> None:
        self._source = source
        self._position = Position()
        self._last = EOF
        self._eof = False
        # Position and last character as they were before the most recent
        # read; push_back restores them.
        self._saved: tuple[Position, str] = (Position(), EOF)
        self._pending: str | None = None
        self._can_push_back = False

    @classmethod
    def from_string(cls, text: str) -> "Cursor":
        return cls(io.StringIO(text))

    @property
    def position(self) -> Position:
        return self._position

    @property
    def last(self) -> str:
        """The most recently read character, EOF before the first read."""
        return self._last

    @property
    def reached_eof(self) -> bool:
        return self._eof and self._pending is None

    @property
    def can_push_back(self) -> bool:
        """True when the last operation was a forward read of a character."""
        return self._can_push_back

    def _advance(self, char: str) -> None:
        line = self._position.line
        column = self._position.column
        if char == "\n":
            if self._last != "\r":
                line += 1
            column = 0
        elif char == "\r":
            line += 1
            column = 0
        else:
            column += 1
        self._position = Position(self._position.index + 1, line, column)

    def next_or_eof(self) -> str:
        """Returns the next character, or EOF without raising."""
        if self._pending is not None:
            char, self._pending = self._pending, None
        elif self._eof:
            self._can_push_back = False
            return EOF
        else:
            char = self._source.read(1)
            if not char:
                self._eof = True
                self._can_push_back = False
                return EOF

        self._saved = (self._position, self._last)
        self._advance(char)
        self._last = char
        self._can_push_back = True
        return char

    def next(self) -> str:
        char = self.next_or_eof()
        if char == EOF:
            raise UnexpectedEof("Unexpected end of input", self._position)
        return char

    def next_chars(self, n: int) -> str:
        """Returns exactly n characters, raising if the input runs short."""
        return "".join([self.next() for _ in range(n)])

    def next_non_blank_or_eof(self) -> str:
        """Skips characters at or below the space character."""
        while True:
            char = self.next_or_eof()
            if char == EOF or char > BLANK_LIMIT:
                return char

    def next_non_blank(self) -> str:
        char = self.next_non_blank_or_eof()
        if char == EOF:
            raise UnexpectedEof("Unexpected end of input", self._position)
        return char

    def push_back(self) -> None:
        """
        Rewinds exactly one character.

        Only valid directly after a forward read that produced a character.
        A second pushback in a row, a pushback before any read, or one after
        a read that hit EOF raises IllegalCursorState.
        """
        if not self._can_push_back:
            raise IllegalCursorState(
                "Cannot step back: no forward read to undo"
                + self._position.describe()
            )
        self._pending = self._last
        self._position, self._last = self._saved
        self._can_push_back = False

    def position_description(self) -> str:
        return self._position.describe()

    def __repr__(self) -> str:
        return f"Cursor{self.position_description()}"
