"""A table view model over a JSON array of objects."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

TOOLTIP_PREFIX = "<p>Selected row is copied.</p><hr>"


class VerticalNums(Enum):
    """How rows are numbered in the vertical header."""

    NONE = "none"
    BASEZERO = "base_zero"
    BASEONE = "base_one"


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def _format_number(value: float) -> str:
    return f"{float(value):g}"


class JsonTableModel:
    """Rows are JSON objects; each header entry names a ``title`` and a field ``index``.

    ``tooltip`` turns a string cell into tooltip HTML (for example system info).
    """

    def __init__(
        self,
        header: Sequence[Mapping[str, str]],
        nums: VerticalNums = VerticalNums.NONE,
        tooltip: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.header: List[Mapping[str, str]] = list(header)
        self.nums = nums
        self._tooltip = tooltip
        self._rows: List[Any] = []

    def set_json(self, data: Union[str, bytes, Sequence[Any], Mapping[str, Any]]) -> bool:
        """Replace the rows; a JSON document that is not an array yields no rows."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        self._rows = list(data) if isinstance(data, (list, tuple)) else []
        return True

    def header_data(self, section: int, orientation: Orientation) -> Optional[Union[str, int]]:
        if orientation is Orientation.HORIZONTAL:
            return self.header[section].get("title", "")
        if self.nums is VerticalNums.BASEZERO:
            return section
        if self.nums is VerticalNums.BASEONE:
            return section + 1
        return None

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return len(self.header)

    def json_object(self, row: int) -> Dict[str, Any]:
        """The row as an object; a row that is not an object reads as empty."""
        value = self._rows[row]
        return dict(value) if isinstance(value, Mapping) else {}

    def _cell(self, row: int, column: int) -> Any:
        key = self.header[column].get("index", "")
        return self.json_object(row).get(key)

    def display(self, row: int, column: int) -> Optional[str]:
        """Text shown in a cell: strings as-is, numbers formatted, anything else None."""
        value = self._cell(row, column)
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return _format_number(value)
        return None

    def tooltip(self, row: int, column: int) -> Optional[str]:
        value = self._cell(row, column)
        if isinstance(value, str) and self._tooltip is not None:
            return TOOLTIP_PREFIX + self._tooltip(value)
        return None