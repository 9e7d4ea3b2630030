from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """Zero-based (line, character) position in a document."""

    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError("TextPosition cannot be negative")

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.character)

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.character})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in a document, in line/character positions.

    Invariant:
    - start <= end
    """

    start: TextPosition
    end: TextPosition

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def on_line(line: int, start_character: int, end_character: int) -> "TextRange":
        """Create a single-line TextRange covering [start_character, end_character)."""
        return TextRange(TextPosition(line, start_character), TextPosition(line, end_character))

    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def as_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Get the range as ((start_line, start_char), (end_line, end_char))."""
        return (self.start.as_tuple(), self.end.as_tuple())

    def __repr__(self) -> str:
        return f"TextRange({self.start!r}, {self.end!r})"


def split_lines(source: str) -> list[str]:
    """Split source on `\\n` with an optional preceding `\\r`.

    Unlike `str.splitlines`, a lone `\\r` and other Unicode separators stay inside
    the line, and a trailing newline yields a final empty line.
    """
    lines = source.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def leading_whitespace(line: str) -> str:
    """Return the indentation prefix of a line verbatim."""
    return line[: len(line) - len(line.lstrip())]
