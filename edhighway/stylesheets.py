"""Discovery and loading of application style sheets and font scaling."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

NOT_SELECTED = "Default"
BIGGER_FONT_MULTIPLIER = 1.5
DEFAULT_DPI = 96.0


def _base_name(file_name: str) -> str:
    return file_name.split(".", 1)[0]


class StyleSheetsLoader:
    """Style sheets found as files directly in ``folder``, sorted by name.

    Calling the loader returns its items, so it can supply a combo setting.
    """

    def __init__(self, folder: Optional[PathLike] = None) -> None:
        self._sheets: List[Tuple[str, str]] = sorted(
            self._scan(folder), key=lambda sheet: sheet[0]
        )

    @staticmethod
    def _scan(folder: Optional[PathLike]) -> List[Tuple[str, str]]:
        if folder is None:
            return []
        directory = Path(folder)
        if not directory.is_dir():
            return []
        prefix = directory.as_posix()
        return [
            (_base_name(entry.name), f"{prefix}/{entry.name}")
            for entry in directory.iterdir()
            if entry.is_file()
        ]

    def items(self) -> List[Tuple[str, str]]:
        """``(name, path)`` pairs, led by the empty "Default" choice."""
        return [(NOT_SELECTED, "")] + list(self._sheets)

    def __call__(self) -> List[Tuple[str, str]]:
        return self.items()

    @staticmethod
    def load_style_sheet(path: str) -> str:
        """Style sheet text from ``path``; an unreadable path is itself the style text."""
        if not path:
            return ""
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError:
            return path


def bigger_font(point_size: float) -> float:
    """The enlarged font point size."""
    return point_size * BIGGER_FONT_MULTIPLIER


def font_size_style(
    point_size: float,
    dpi: Optional[float] = None,
    multiplier: float = BIGGER_FONT_MULTIPLIER,
) -> str:
    """A ``font-size`` rule in pixels, or an empty string for a non-positive size."""
    if point_size <= 0.0:
        return ""
    resolution = DEFAULT_DPI if dpi is None else dpi
    pixels = point_size * multiplier * resolution / 72.0
    return f"font-size: {pixels:.1f}px;"