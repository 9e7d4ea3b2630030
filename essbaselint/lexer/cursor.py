"""Character-level primitives shared by the keyword scanner and the comma detector.

Both passes must agree on what counts as comment or string content, so every
skip over non-code text goes through these helpers.
"""

from typing import Final

BLOCK_COMMENT_OPEN: Final[str] = "/*"
BLOCK_COMMENT_CLOSE: Final[str] = "*/"
QUOTE: Final[str] = '"'
BACKSLASH: Final[str] = "\\"


def is_word_char(ch: str) -> bool:
    """ASCII identifier character (`[A-Za-z0-9_]`)."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


def opens_block_comment(line: str, position: int) -> bool:
    return line.startswith(BLOCK_COMMENT_OPEN, position)


def skip_block_comment(line: str, position: int) -> tuple[int, bool]:
    """Advance through block comment content that starts at `position`.

    Returns the new position and whether the comment is still open at that point.
    An unterminated comment consumes the rest of the line.
    """
    end = line.find(BLOCK_COMMENT_CLOSE, position)
    if end == -1:
        return len(line), True
    return end + len(BLOCK_COMMENT_CLOSE), False


def skip_string(line: str, position: int) -> int:
    """Skip a double-quoted literal whose opening quote is at `position`.

    A backslash consumes itself plus the next character, even past the end of
    the line. An unterminated literal ends with the line.
    """
    length = len(line)
    position += 1
    while position < length:
        ch = line[position]
        if ch == BACKSLASH:
            position += 2
            continue
        position += 1
        if ch == QUOTE:
            break
    return min(position, length)


def skip_whitespace(line: str, position: int) -> int:
    length = len(line)
    while position < length and line[position].isspace():
        position += 1
    return position
