"""Parsing of single G-code lines into command records."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUMBER_CHARS = frozenset("0123456789.+-")
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_MAX_NUMBER_CHARS = 15
_COMMAND_LETTERS = frozenset("GM")
_PARAMETER_LETTERS = frozenset("XYZFSTPRIJK")


class GCodeParseError(ValueError):
    """Raised when a line holds no G or M command."""


@dataclass(frozen=True)
class GCode:
    """A parsed command; parameters absent from the line are None."""

    letter: str
    number: int
    x: float | None = None
    y: float | None = None
    z: float | None = None
    f: float | None = None
    s: float | None = None
    t: float | None = None
    p: float | None = None
    r: float | None = None
    i: float | None = None
    j: float | None = None
    k: float | None = None

    @property
    def code(self) -> str:
        return f"{self.letter}{self.number}"


def _read_number(line: str, start: int) -> tuple[float, int]:
    """Consume number-like characters from ``start``; return value and new index."""
    end = start
    while end < len(line) and line[end] in _NUMBER_CHARS:
        end += 1
    text = line[start:end][:_MAX_NUMBER_CHARS]
    match = _NUMBER_PREFIX.match(text)
    return (float(match.group()) if match else 0.0), end


def parse_gcode(line: str) -> GCode:
    """Parse one line of G-code.

    Spaces and tabs are skipped, ``( ... )`` comments are dropped and ``;``
    ends the line. Unknown letters are ignored. The last G or M word wins.
    """
    letter: str | None = None
    number = 0
    params: dict[str, float] = {}

    index = 0
    length = len(line)
    while index < length:
        char = line[index].upper()

        if char == "\0" or char == ";":
            break
        if char in (" ", "\t"):
            index += 1
            continue
        if char == "(":
            close = line.find(")", index)
            index = length if close < 0 else close + 1
            continue

        value, index = _read_number(line, index + 1)

        if char in _COMMAND_LETTERS:
            letter = char
            number = int(value) & 0xFFFF
        elif char in _PARAMETER_LETTERS:
            params[char.lower()] = value

    if letter is None:
        raise GCodeParseError(f"no G or M command in line: {line!r}")
    return GCode(letter=letter, number=number, **params)