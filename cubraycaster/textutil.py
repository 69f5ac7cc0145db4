"""Small text helpers used when reading scene files."""

from __future__ import annotations

from .constants import INT_MAX, INT_MIN, MAP_TOKENS, SPACE_CHARS

_INFO_PREFIXES = ("EA", "NO", "SO", "WE", "F", "C")


def is_space(char: str) -> bool:
    """Return True for a single whitespace character."""
    return len(char) == 1 and char in SPACE_CHARS


def is_empty(text: str) -> bool:
    """Return True when the text holds only whitespace (or nothing)."""
    return all(is_space(char) for char in text)


def in_set(char: str, chars: str) -> bool:
    """Return True when ``char`` is one of ``chars``."""
    return len(char) == 1 and char in chars


def atoi(text: str) -> int:
    """Parse a leading integer; -1 when it overflows a 32-bit int."""
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
        if -value < INT_MIN or (value > INT_MAX and sign == 1):
            return -1
    return value * sign


def split_set(text: str, chars: str) -> list[str]:
    """Split text into the runs of characters not in ``chars``."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if in_set(char, chars):
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def trim(text: str, chars: str) -> str:
    """Strip ``chars`` from both ends of the text.

    The trailing scan stops before the first character, so a text whose
    only kept character is its first one trims to the empty string.
    """
    if not text:
        return ""
    start = 0
    while start < len(text) and in_set(text[start], chars):
        start += 1
    end = next(
        (i for i in range(len(text) - 1, 0, -1) if not in_set(text[i], chars)),
        0,
    )
    if end == 0:
        return ""
    return text[start : end + 1]


def index_of_any(text: str, chars: str) -> int:
    """Index of the first character of text found in ``chars``, or -1."""
    return next((i for i, char in enumerate(text) if char in chars), -1)


def is_info_line(line: str) -> bool:
    """True for blank lines and lines starting with an info identifier."""
    stripped = line.lstrip(SPACE_CHARS)
    if not stripped:
        return True
    return stripped.startswith(_INFO_PREFIXES)


def pad_line(source: str | None, length: int) -> str:
    """Build a row of ``length - 1`` cells framed by 'x'.

    Map tokens of ``source`` are copied one cell to the right; every other
    cell, and every character that is not a map token, becomes 'x'.
    """
    cells = ["x"] * max(length - 1, 0)
    for pos, char in enumerate(source or "", start=1):
        if pos >= len(cells):
            break
        if in_set(char, MAP_TOKENS):
            cells[pos] = char
    return "".join(cells)