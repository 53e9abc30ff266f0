"""Removal of furigana (small annotation lines) from binary text images."""

from __future__ import annotations

from typing import List, Optional, Tuple

from edhighway.bounding_rect import BinaryImage

FURIGANA_MIN_FG_PIX_PER_LINE = 1.0
FURIGANA_MIN_WIDTH = 5.0


def _span_length(span: Tuple[int, int]) -> int:
    return abs(span[1] - span[0]) + 1


def _erase_furigana(image: BinaryImage, scale_factor: float, vertical: bool) -> Optional[int]:
    min_fg_per_line = int(FURIGANA_MIN_FG_PIX_PER_LINE * scale_factor)
    min_span_width = int(FURIGANA_MIN_WIDTH * scale_factor)
    lines = image.width if vertical else image.height
    across = image.height if vertical else image.width

    def pixel(line: int, pos: int) -> int:
        return image.get(line, pos) if vertical else image.get(pos, line)

    def erase(start: int, size: int) -> None:
        if vertical:
            image.clear_rect(start, 0, size, image.height)
        else:
            image.clear_rect(0, start, image.width, size)

    spans: List[Tuple[int, int]] = []
    span_start: Optional[int] = None
    good_in_span = 0
    for line in range(lines):
        fg_count = 0
        good = False
        for pos in range(across):
            if pixel(line, pos) == 1:
                fg_count += 1
                if fg_count >= min_fg_per_line:
                    good = True
                    break

        if good and line == lines - 1:
            good = False
            good_in_span += 1

        if good:
            if span_start is None:
                span_start = line
            good_in_span += 1
        else:
            if span_start is not None and good_in_span >= min_span_width:
                spans.append((span_start, line))
            span_start = None
            good_in_span = 0

    if not spans:
        return None

    lengths = sorted(_span_length(span) for span in spans)
    upper_half = lengths[len(lengths) // 2 :]
    mean_upper_half = sum(upper_half) / len(upper_half)
    threshold = int(mean_upper_half * 0.6)

    position = 0
    minor = 0
    for start, end in spans:
        if _span_length((start, end)) >= threshold:
            erase(position, start - position)
            position = end + 1
        else:
            minor += 1

    text_lines = max(len(spans) - minor, 1)

    if position != 0 and position < lines - 1:
        erase(position, lines - position)

    return text_lines


def erase_furigana_vertical(image: BinaryImage, scale_factor: float) -> Optional[int]:
    """Erase narrow column spans in place; return the number of text lines.

    Returns None, leaving the image untouched, when no text span is found.
    """
    return _erase_furigana(image, scale_factor, vertical=True)


def erase_furigana_horizontal(image: BinaryImage, scale_factor: float) -> Optional[int]:
    """Erase narrow row spans in place; return the number of text lines.

    Returns None, leaving the image untouched, when no text span is found.
    """
    return _erase_furigana(image, scale_factor, vertical=False)