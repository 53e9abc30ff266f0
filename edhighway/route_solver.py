"""Closed-route planning over star systems with Little's branch-and-bound reduction."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

WEIGHT_MAX = 2**64 - 1
INVALID_IJ = 2**64 - 1
_ALMOST_INF = int(0.75 * float(WEIGHT_MAX))

Matrix = Dict[int, Dict[int, int]]


def _wrap(value: int) -> int:
    return value & WEIGHT_MAX


def _row_values(matrix: Matrix, row: int) -> List[int]:
    return list(matrix.get(row, {}).values())


def _col_values(matrix: Matrix, col: int) -> List[int]:
    return [cells[col] for cells in matrix.values() if col in cells]


def _row_min(matrix: Matrix, row: int) -> int:
    return min(_row_values(matrix, row), default=WEIGHT_MAX)


def _col_min(matrix: Matrix, col: int) -> int:
    return min(_col_values(matrix, col), default=WEIGHT_MAX)


def _first_row_columns(matrix: Matrix) -> List[int]:
    return list(next(iter(matrix.values()), {}).keys())


def _normalize(matrix: Matrix) -> int:
    """Reduce every row and column by its minimum; return the total subtracted."""
    if not matrix:
        return 0
    total = 0
    for cells in matrix.values():
        smallest = min(cells.values(), default=WEIGHT_MAX)
        total = _wrap(total + smallest)
        for col in cells:
            cells[col] -= smallest
    for col in _first_row_columns(matrix):
        smallest = _col_min(matrix, col)
        total = _wrap(total + smallest)
        for cells in matrix.values():
            if col in cells:
                cells[col] -= smallest
    return total


def _set_infinite(matrix: Matrix, row: int, col: int) -> None:
    cells = matrix.get(row)
    if cells is not None and col in cells:
        cells[col] = WEIGHT_MAX


def _ensure_infinity(matrix: Matrix) -> None:
    """Make sure a row lacking an infinite cell gets one."""
    row = next(
        (r for r in matrix if max(_row_values(matrix, r), default=0) < _ALMOST_INF),
        INVALID_IJ,
    )
    if row == INVALID_IJ:
        return
    col = next(
        (
            c
            for c in _first_row_columns(matrix)
            if max(_col_values(matrix, c), default=0) < _ALMOST_INF
        ),
        INVALID_IJ,
    )
    _set_infinite(matrix, row, col)


@dataclass
class Bisector:
    """An edge ``i -> j`` chosen by the algorithm with its penalty ``d``."""

    i: int = INVALID_IJ
    j: int = INVALID_IJ
    d: int = 0

    def __lt__(self, other: "Bisector") -> bool:
        return self.d < other.d

    def __le__(self, other: "Bisector") -> bool:
        return self.d <= other.d

    def __str__(self) -> str:
        return f"(I: {self.i + 1}; J: {self.j + 1}), D: {self.d}"

    def make_smaller_matrix(self, matrix: Matrix) -> Matrix:
        """Return a copy without row ``i`` and column ``j``, with ``j -> i`` forbidden."""
        smaller = {
            row: {col: value for col, value in cells.items() if col != self.j}
            for row, cells in matrix.items()
            if row != self.i
        }
        _set_infinite(smaller, self.j, self.i)
        return smaller


def matrix_procedure(src: Sequence[Sequence[int]]) -> List[Bisector]:
    """Select route edges from a square weight matrix (diagonal should be WEIGHT_MAX)."""
    size = len(src)
    matrix: Matrix = {i: {j: src[i][j] for j in range(size)} for i in range(size)}
    result: List[Bisector] = []

    while len(matrix) > 2:
        _ensure_infinity(matrix)
        reduction = _normalize(matrix)

        best = Bisector()
        candidates: List[Bisector] = []
        for i, cells in matrix.items():
            for j, value in cells.items():
                if value != 0:
                    continue
                cells[j] = WEIGHT_MAX
                candidate = Bisector(i, j, _wrap(_row_min(matrix, i) + _col_min(matrix, j)))
                cells[j] = 0
                if best.d == candidate.d:
                    candidates.append(candidate)
                if best < candidate:
                    best = candidate
                    candidates = [candidate]

        without_edge = _wrap(best.d + reduction)
        reduced: Matrix = {}
        with_edge = 0
        for candidate in candidates:
            smaller = candidate.make_smaller_matrix(matrix)
            cost = _normalize(smaller)
            if cost >= with_edge:
                with_edge = cost
                reduced = smaller
                best = candidate

        if without_edge < with_edge:
            matrix.setdefault(best.i, {})[best.j] = WEIGHT_MAX
        else:
            matrix = reduced
            result.append(best)

    _ensure_infinity(matrix)
    for i, cells in matrix.items():
        for j, value in cells.items():
            if value == 0:
                result.append(Bisector(i, j))
    return result


@dataclass(frozen=True)
class StarSystem:
    """A named star system with galactic coordinates; ``blank`` when data was missing."""

    name: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    blank: bool = False

    @classmethod
    def from_json(cls, js: Any) -> "StarSystem":
        """Build from EDSM system JSON holding ``name`` and ``coords``."""
        name = js.get("name", "") if isinstance(js, dict) else ""
        if not isinstance(name, str):
            name = ""
        try:
            coords = js["coords"]
            return cls(name, float(coords["x"]), float(coords["y"]), float(coords["z"]))
        except (KeyError, TypeError, ValueError):
            return cls(name, blank=True)

    def squared_distance(self, other: "StarSystem") -> float:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2

    def distance(self, other: "StarSystem") -> float:
        return math.sqrt(self.squared_distance(other))


def path_length(systems: Sequence[StarSystem]) -> float:
    """Length of the open path visiting ``systems`` in order."""
    return sum(a.distance(b) for a, b in zip(systems, systems[1:]))


def _to_weight(value: float) -> int:
    return int(value * 100.0)


class LittleAlgorithm:
    """Finds a closed route through star systems."""

    def __init__(self, systems: Iterable[StarSystem]) -> None:
        seen = set()
        unique: List[StarSystem] = []
        for system in systems:
            if system.name not in seen:
                seen.add(system.name)
                unique.append(system)
        self.source: List[StarSystem] = [s for s in unique if not s.blank]
        self.original_length: float = path_length(self.source)
        self.last_route_len: float = 0.0

        count = len(self.source)
        if count < 3:
            self._result: List[Bisector] = (
                [Bisector(0, 0, 0)] if count == 1 else [Bisector(0, 1, 0)] if count == 2 else []
            )
            return

        distances = [
            [
                WEIGHT_MAX if a is b else _to_weight(a.squared_distance(b))
                for b in self.source
            ]
            for a in self.source
        ]
        self._result = matrix_procedure(distances)

    def _index_of(self, name: str) -> Optional[int]:
        return next((n for n, s in enumerate(self.source) if s.name == name), None)

    def get_route(self, start_at: str) -> List[str]:
        """Return system names in route order starting at ``start_at``.

        The route length (closing back to the start) is stored in ``last_route_len``.
        """
        names: List[str] = []
        length = 0.0
        start = self._index_of(start_at)
        if start is not None:
            if len(self.source) < 3:
                names.append(self.source[start].name)
                if len(self.source) == 2:
                    names.append(self.source[1 - start].name)
                    length = self.source[0].distance(self.source[-1])
            else:
                edges = {}
                for edge in self._result:
                    edges.setdefault(edge.i, edge.j)
                index = start
                visited = set()
                while True:
                    names.append(self.source[index].name)
                    visited.add(index)
                    following = edges.get(index)
                    if following is None or following >= len(self.source):
                        break
                    length += self.source[index].distance(self.source[following])
                    index = following
                    if index == start or index in visited:
                        break
        self.last_route_len = length
        return names


def route(systems: Iterable[StarSystem], start: str) -> Tuple[List[str], float]:
    """Plan a route from ``start``; return the names and the route length."""
    solver = LittleAlgorithm(systems)
    names = solver.get_route(start)
    return names, solver.last_route_len