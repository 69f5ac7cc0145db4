"""Reading and validating ``.cub`` scene files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from .constants import INFO_COUNT, INFO_IDS, PLAYER_TOKENS
from .textutil import (
    atoi,
    in_set,
    index_of_any,
    is_empty,
    is_info_line,
    is_space,
    pad_line,
    split_set,
    trim,
)

_COLOR_IDS = ("F", "C")
_START_ANGLES = {"N": 90.0, "E": 180.0, "S": 270.0, "W": 0.0}
_ALLOWED_MAP_CHARS = " NWES01\t"


class CubError(Exception):
    """A scene file or command line that cannot be used."""


@dataclass(frozen=True)
class Scene:
    """A validated scene: textures, colours and the map grid."""

    infos: dict[str, str]
    rows: tuple[str, ...]
    width: int
    height: int
    floor: int
    ceiling: int
    player: str
    angle: float
    source: tuple[str, ...] = field(default=(), repr=False)

    def info(self, ident: str) -> str | None:
        """Return the content given for an identifier, or None."""
        return self.infos.get(ident)


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a 0xRRGGBB integer."""
    commas = 0
    for pos, char in enumerate(text):
        if char == ",":
            if text[pos + 1 : pos + 2] == ",":
                raise CubError("Invalid color")
            commas += 1
        elif not "0" <= char <= "9":
            raise CubError("Invalid color")
    parts = split_set(text, " ,\t\n")
    if len(parts) != 3:
        raise CubError("Invalid color")
    values = [atoi(part) for part in parts]
    if any(value < 0 or value > 255 for value in values):
        raise CubError("Invalid color")
    if commas != 2:
        raise CubError("Invalid color")
    red, green, blue = values
    return red << 16 | green << 8 | blue


def parse_info(line: str, check_files: bool = True) -> tuple[str, str]:
    """Split an info line into its identifier and trimmed content.

    Colour contents are validated; texture paths must be readable when
    ``check_files`` is true.
    """
    pos = 0
    while pos < len(line) and is_space(line[pos]):
        pos += 1
    text = line[pos:]
    cut = index_of_any(text, " \t")
    ident = text if cut == -1 else text[:cut]
    content = trim(text[len(ident) :], " \t\n")
    if ident not in INFO_IDS:
        raise CubError("Invalid id")
    if ident in _COLOR_IDS:
        parse_color(content)
    elif check_files:
        try:
            with open(content, "rb"):
                pass
        except OSError as exc:
            raise CubError("Cannot open xpm file") from exc
    return ident, content


def is_closed(rows: Sequence[str], width: int) -> bool:
    """True when no walkable cell of the map touches the outside."""
    length = width + 3
    border = pad_line(None, length)
    grid = [border, *(pad_line(row, length) for row in rows), border]
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != "x":
                continue
            neighbours = []
            if x + 1 < len(row):
                neighbours.append(row[x + 1])
            if y + 1 < len(grid):
                neighbours.append(grid[y + 1][x])
            if x > 0:
                neighbours.append(row[x - 1])
            if y > 0:
                neighbours.append(grid[y - 1][x])
            if any(not in_set(cell_next, "x1") for cell_next in neighbours):
                return False
    return True


def find_player(rows: Iterable[str]) -> str:
    """Return the single player token of the map."""
    found: list[str] = []
    for row in rows:
        for char in row:
            if in_set(char, PLAYER_TOKENS):
                found.append(char)
            elif not in_set(char, _ALLOWED_MAP_CHARS):
                raise CubError("Invalid token")
    if len(found) != 1:
        raise CubError("Invalid position")
    return found[-1]


def _select_lines(lines: Iterable[str]) -> list[str]:
    """Drop blank lines among the leading info lines; keep the rest."""
    selected: list[str] = []
    in_header = True
    for line in lines:
        if in_header and is_info_line(line):
            if not is_empty(line):
                selected.append(line)
            continue
        in_header = False
        selected.append(line)
    return selected


def _map_rows(map_lines: Sequence[str]) -> tuple[list[str], int]:
    if not map_lines:
        raise CubError("Invalid map")
    width = 0
    rows: list[str] = []
    for line in map_lines:
        if len(line) > width:
            width = len(line) - 1
        if is_empty(line):
            raise CubError("Invalid map")
        cut = index_of_any(line, "\n")
        rows.append(line if cut == -1 else line[:cut])
    if "\n" in map_lines[-1]:
        raise CubError("Invalid map")
    return rows, width


def parse_scene(lines: Iterable[str], check_files: bool = True) -> Scene:
    """Build a Scene from the lines of a scene file (newlines kept)."""
    full = _select_lines(lines)
    info_lines = [line for line in full if is_info_line(line)]
    if len(info_lines) != INFO_COUNT:
        raise CubError("Invalid file")
    entries = [parse_info(line, check_files) for line in info_lines]
    idents = [ident for ident, _ in entries]
    if len(set(idents)) != len(idents):
        raise CubError("Duplicate infos")
    infos = dict(entries)

    rows, width = _map_rows(full[INFO_COUNT:])
    if not is_closed(rows, width):
        raise CubError("Invalid map")
    player = find_player(rows)

    return Scene(
        infos=infos,
        rows=tuple(rows),
        width=width,
        height=len(rows),
        floor=parse_color(infos["F"]),
        ceiling=parse_color(infos["C"]),
        player=player,
        angle=_START_ANGLES[player],
        source=tuple(full),
    )


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a file as lines, each keeping its trailing newline."""
    data = Path(path).read_bytes().decode("latin-1")
    parts = data.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def check_args(argv: Sequence[str]) -> str:
    """Validate the arguments after the program name; return the scene path."""
    if len(argv) != 1:
        raise CubError("Usage: cub3d <map_file.cub>")
    path = argv[0]
    if os.path.isdir(path):
        raise CubError("Is a directory")
    if not path.endswith(".cub"):
        raise CubError("Invalid file <*.cub>")
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise CubError("Cannot read file") from exc
    if all(is_empty(line) for line in lines):
        raise CubError("Empty file")
    return path


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and validate the scene file at ``path``."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise CubError("Cannot read file") from exc
    return parse_scene(lines, check_files=True)