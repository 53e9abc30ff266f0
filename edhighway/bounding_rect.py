"""Binary images and detection of the text block around a point."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

NO_VALUE = -1
_MAX_ITERATIONS = 10


class BinaryImage:
    """A 1-bit image; 1 is a foreground (black) pixel, 0 is background."""

    def __init__(self, width: int, height: int, pixels: Optional[Iterable[int]] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("image size must not be negative")
        self.width = width
        self.height = height
        if pixels is None:
            self._pixels = bytearray(width * height)
        else:
            self._pixels = bytearray(1 if p else 0 for p in pixels)
            if len(self._pixels) != width * height:
                raise ValueError("pixel count does not match image size")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "BinaryImage":
        """Build an image from a list of rows of 0/1 values."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls(width, height, (p for row in rows for p in row))

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        return self._pixels[self._offset(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        self._pixels[self._offset(x, y)] = 1 if value else 0

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        """Clear the rectangle, clipped to the image; empty rectangles do nothing."""
        left, top = max(x, 0), max(y, 0)
        right, bottom = min(x + width, self.width), min(y + height, self.height)
        if left >= right or top >= bottom:
            return
        for row in range(top, bottom):
            start = row * self.width
            self._pixels[start + left : start + right] = bytes(right - left)

    def rows(self) -> List[List[int]]:
        return [
            list(self._pixels[row * self.width : (row + 1) * self.width])
            for row in range(self.height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryImage):
            return NotImplemented
        return (self.width, self.height, self._pixels) == (
            other.width,
            other.height,
            other._pixels,
        )

    def __repr__(self) -> str:
        return f"BinaryImage({self.width}x{self.height})"


@dataclass
class Box:
    """A rectangle; ``x + w`` and ``y + h`` are the last covered column and row."""

    x: int
    y: int
    w: int = 0
    h: int = 0


class D8(Enum):
    TOP = "top"
    TOP_RIGHT = "top_right"
    RIGHT = "right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM = "bottom"
    BOTTOM_LEFT = "bottom_left"
    LEFT = "left"
    TOP_LEFT = "top_left"


def _in_range_x(image: BinaryImage, x: int) -> bool:
    return 0 <= x < image.width


def _in_range_y(image: BinaryImage, y: int) -> bool:
    return 0 <= y < image.height


def is_black(image: BinaryImage, x: int, y: int) -> bool:
    """True if (x, y) is inside the image and is a foreground pixel."""
    return _in_range_x(image, x) and _in_range_y(image, y) and image.get(x, y) == 1


def find_nearest_black_pixel(
    image: BinaryImage, start_x: int, start_y: int, max_dist: int
) -> Optional[Tuple[int, int]]:
    """Spiral outward from the start (not testing the start itself) for a black pixel."""
    x, y = start_x, start_y
    for dist in range(1, max_dist):
        x += 1
        if is_black(image, x, y):
            return x, y
        for dx, dy, steps in ((0, 1, dist * 2 - 1), (-1, 0, dist * 2), (0, -1, dist * 2),
                              (1, 0, dist * 2)):
            for _ in range(steps):
                x += dx
                y += dy
                if is_black(image, x, y):
                    return x, y
    return None


def line_contains_black_horiz(image: BinaryImage, start_x: int, start_y: int, width: int) -> bool:
    """Scan x from start_x to start_x + width inclusive, stopping at the image edge."""
    x = start_x
    while x <= start_x + width and _in_range_x(image, x):
        if is_black(image, x, start_y):
            return True
        x += 1
    return False


def line_contains_black_vert(image: BinaryImage, start_x: int, start_y: int, height: int) -> bool:
    """Scan y from start_y to start_y + height inclusive, stopping at the image edge."""
    y = start_y
    while y <= start_y + height and _in_range_y(image, y):
        if is_black(image, start_x, y):
            return True
        y += 1
    return False


def _try_expand(image: BinaryImage, rect: Box, direction: D8, dist: int) -> bool:
    if direction is D8.TOP:
        if line_contains_black_horiz(image, rect.x, rect.y - dist, rect.w):
            rect.y -= dist
            rect.h += dist
            return True
    elif direction is D8.TOP_RIGHT:
        if is_black(image, rect.x + rect.w + dist, rect.y - dist):
            rect.y -= dist
            rect.h += dist
            rect.w += dist
            return True
    elif direction is D8.RIGHT:
        if line_contains_black_vert(image, rect.x + rect.w + dist, rect.y, rect.h):
            rect.w += dist
            return True
    elif direction is D8.BOTTOM_RIGHT:
        if is_black(image, rect.x + rect.w + dist, rect.y + rect.h + dist):
            rect.h += dist
            rect.w += dist
            return True
    elif direction is D8.BOTTOM:
        if line_contains_black_horiz(image, rect.x, rect.y + rect.h + dist, rect.w):
            rect.h += dist
            return True
    elif direction is D8.BOTTOM_LEFT:
        if is_black(image, rect.x - dist, rect.y + rect.h + dist):
            rect.x -= dist
            rect.h += dist
            rect.w += dist
            return True
    elif direction is D8.LEFT:
        if line_contains_black_vert(image, rect.x - dist, rect.y, rect.h):
            rect.x -= dist
            rect.w += dist
            return True
    elif direction is D8.TOP_LEFT:
        if is_black(image, rect.x - dist, rect.y + dist):
            rect.x -= dist
            rect.y -= dist
            rect.h += dist
            rect.w += dist
            return True
    return False


def _expand(
    image: BinaryImage, steps: Sequence[Tuple[D8, int]], rect: Box, keep_going: bool
) -> None:
    index = 0
    while index < len(steps):
        direction, dist = steps[index]
        if not _try_expand(image, rect, direction, dist):
            index += 1
        elif not keep_going:
            return


def get_bounding_rect(
    image: BinaryImage,
    start_x: int,
    start_y: int,
    vertical: bool,
    lookahead: int,
    lookbehind: int,
    max_search_dist: int,
) -> Box:
    """Grow a rectangle from the black pixel nearest the start to cover its text block."""
    lookahead, lookbehind = int(lookahead), int(lookbehind)
    nearest = find_nearest_black_pixel(image, int(start_x), int(start_y), int(max_search_dist))
    x, y = nearest if nearest is not None else (NO_VALUE, NO_VALUE)
    rect = Box(x, y)

    if vertical:
        sides = (
            [(D8.TOP, i) for i in range(1, lookbehind + 1)]
            + [(D8.RIGHT, 1), (D8.LEFT, 1)]
            + [(D8.BOTTOM, i) for i in range(1, lookahead + 1)]
        )
    else:
        sides = (
            [(D8.TOP, 1)]
            + [(D8.LEFT, i) for i in range(1, lookbehind + 1)]
            + [(D8.BOTTOM, 1)]
            + [(D8.RIGHT, i) for i in range(1, lookahead + 1)]
        )
    corners = [(D8.TOP_RIGHT, 1), (D8.BOTTOM_RIGHT, 1), (D8.BOTTOM_LEFT, 1), (D8.TOP_LEFT, 1)]

    last = Box(rect.x, rect.y, rect.w, rect.h)
    for _ in range(_MAX_ITERATIONS):
        _expand(image, sides, rect, True)
        _expand(image, corners, rect, False)
        if rect == last:
            break
        last = Box(rect.x, rect.y, rect.w, rect.h)
    return rect