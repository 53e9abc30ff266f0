"""Pick a star system's name out of OCR text of the galaxy map popup."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List, Sequence

_MARKERS = ("DISTANCE: ", "ARRIVAL POINT:")
_LAST_PART = re.compile(r"^[A-H]\d+-\d+$")
_BEFORE_LAST_PART = re.compile(r"^\w\w-\w$")
_PLANET = re.compile(r"^\d+\s*\w*$")
_LINE_BREAK = re.compile(r"[\n\r]")


def _star_pattern(reversed_parts: Sequence[str]) -> bool:
    if len(reversed_parts) < 3:
        return False
    return bool(
        _LAST_PART.match(reversed_parts[0]) and _BEFORE_LAST_PART.match(reversed_parts[1])
    )


def _looks_like_generated_name(line: str) -> bool:
    parts = [part for part in line.split(" ") if part]
    if len(parts) < 3:
        return False
    reversed_parts = parts[::-1]
    planet = bool(_PLANET.match(reversed_parts[0])) and _star_pattern(reversed_parts[1:])
    return planet or _star_pattern(reversed_parts)


def try_detect_star_from_map_popup(lines: Iterable[str]) -> str:
    """Return the most likely system name among OCR lines, or an empty string.

    The line above a "DISTANCE:" / "ARRIVAL POINT:" line wins; otherwise the last
    line shaped like a generated system (or planet) name is used, with "!" read as "I".
    """
    items = list(lines)
    for index, line in enumerate(items):
        if line.startswith(_MARKERS):
            if index > 0:
                return items[index - 1]
            break

    for line in reversed(items):
        if _looks_like_generated_name(line):
            return line.replace("!", "I")
    return ""


def split_filter(text: str) -> List[str]:
    """Split OCR output into trimmed, NFD-normalised, upper-cased lines longer than 3."""
    result = []
    for line in _LINE_BREAK.split(text):
        if not line:
            continue
        cleaned = unicodedata.normalize("NFD", line.strip()).upper()
        if len(cleaned) > 3:
            result.append(cleaned)
    return result