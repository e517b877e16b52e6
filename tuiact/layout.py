"""Geometry and text decisions shared by the widget renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from wcwidth import wcswidth, wcwidth

_CELL_LIMIT = 0xFFFF

_TOAST_MIN_WIDTH = 20
_TOAST_MAX_WIDTH = 40
_TOAST_HEIGHT_WITH_BODY = 5
_TOAST_HEIGHT = 4

_MODAL_WIDTH_PADDING = 8
_MODAL_MIN_WIDTH = 20
_MODAL_HEIGHT_PADDING = 6
_MODAL_MIN_HEIGHT = 6

_FORM_LABEL_MIN = 10
_FORM_LABEL_MAX = 90


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return min(self.x + self.width, _CELL_LIMIT)

    @property
    def bottom(self) -> int:
        return min(self.y + self.height, _CELL_LIMIT)

    def inner(self) -> "Rect":
        """The area left inside a one-cell border on every side."""
        return Rect(
            x=min(self.x + 1, self.right),
            y=min(self.y + 1, self.bottom),
            width=max(self.width - 2, 0),
            height=max(self.height - 2, 0),
        )


@dataclass(frozen=True)
class Percentage:
    """A size given as a percentage of the available space."""

    value: int


@dataclass(frozen=True)
class Ratio:
    """A size given as a fraction of the available space."""

    numerator: int
    denominator: int


Constraint = Union[Percentage, Ratio]


def flex_constraints(count: int) -> List[Ratio]:
    """Equal shares for ``count`` flex children."""
    if count <= 0:
        return []
    return [Ratio(1, count)] * count


def desired_dimension(
    total: int, desired: Optional[int], padding: int, minimum: int
) -> int:
    """Pick a size: ``desired`` or ``total - padding``, capped by ``total``, at least ``minimum``."""
    fallback = max(max(total - padding, 0), minimum)
    chosen = fallback if desired is None else desired
    return max(min(chosen, total), minimum)


def modal_area(area: Rect, width: Optional[int], height: Optional[int]) -> Rect:
    """The centred rectangle a modal occupies within ``area``."""
    modal_width = desired_dimension(
        area.width, width, _MODAL_WIDTH_PADDING, _MODAL_MIN_WIDTH
    )
    modal_height = desired_dimension(
        area.height, height, _MODAL_HEIGHT_PADDING, _MODAL_MIN_HEIGHT
    )
    origin_x = area.x + max(area.width - modal_width, 0) // 2
    origin_y = area.y + max(area.height - modal_height, 0) // 2
    return Rect(origin_x, origin_y, modal_width, modal_height)


def toast_areas(area: Rect, has_body: Sequence[bool]) -> List[Tuple[int, Rect]]:
    """Place toasts bottom-right, newest lowest.

    ``has_body`` holds one flag per toast, oldest first. Returns
    ``(toast index, rect)`` pairs in drawing order, newest first; toasts that
    no longer fit above the ones already placed are left out.
    """
    if not has_body:
        return []
    width = min(max(area.width, _TOAST_MIN_WIDTH), _TOAST_MAX_WIDTH)
    left = area.x + max(area.width - width, 0)
    cursor_y = area.y + area.height
    placed: List[Tuple[int, Rect]] = []
    for index in reversed(range(len(has_body))):
        height = _TOAST_HEIGHT_WITH_BODY if has_body[index] else _TOAST_HEIGHT
        if cursor_y < height:
            break
        cursor_y -= height
        placed.append((index, Rect(left, cursor_y, width, height)))
    return placed


def resolve_table_widths(
    header_len: Optional[int],
    first_row_len: Optional[int],
    column_widths: Optional[Sequence[int]],
) -> List[Constraint]:
    """Column constraints from explicit percentages or equal shares.

    The column count comes from the header, else the first row, else 1.
    Explicit widths are capped at 100, truncated to the column count, and
    padded with equal shares when too few are given.
    """
    if header_len is not None:
        column_count = header_len
    elif first_row_len is not None:
        column_count = first_row_len
    else:
        column_count = 1
    column_count = max(column_count, 1)
    fallback = Ratio(1, column_count)

    if column_widths is None:
        return [fallback] * column_count

    constraints: List[Constraint] = [
        Percentage(min(percent, 100)) for percent in column_widths[:column_count]
    ]
    constraints.extend([fallback] * (column_count - len(constraints)))
    return constraints


def clamp_highlight(index: Optional[int], length: int) -> Optional[int]:
    """The row to highlight, kept within ``length`` rows; ``None`` when there is none."""
    if index is None or length <= 0:
        return None
    return min(index, length - 1)


def tree_row_text(depth: int, label: str, has_children: bool, expanded: bool) -> str:
    """The indented, marked line shown for a tree row."""
    indent = "  " * depth
    if has_children:
        marker = "v " if expanded else "> "
    else:
        marker = "  "
    return f"{indent}{marker}{label}"


def gauge_label(ratio: float, label: Optional[str]) -> str:
    """The label a gauge shows: the given one, or the rounded percentage."""
    if label is not None:
        return label
    percent = ratio * 100.0
    rounded = math.copysign(math.floor(abs(percent) + 0.5), percent)
    return f"{rounded:.0f}%"


def form_label_widths(label_width: int) -> List[Percentage]:
    """Label and value column widths, with the label kept between 10% and 90%."""
    label_pct = min(max(label_width, _FORM_LABEL_MIN), _FORM_LABEL_MAX)
    return [Percentage(label_pct), Percentage(100 - label_pct)]


def active_tab_index(active: int, count: int) -> int:
    """The selected tab, kept within the available tabs."""
    return min(active, max(count - 1, 0))


def input_display_value(value: str, secure: bool) -> str:
    """What a text input shows: the value, or one asterisk per character."""
    return "*" * len(value) if secure else value


def _display_width(text: str) -> int:
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in text)


def input_cursor_x(
    inner: Rect, render_area: Rect, value: str, cursor: int, secure: bool
) -> Optional[int]:
    """The column of the cursor in a text input, or ``None`` when there is no room."""
    if inner.height <= 0:
        return None
    prefix = value[: min(cursor, len(value))]
    offset = len(prefix) if secure else _display_width(prefix)
    cursor_x = min(inner.x + offset, _CELL_LIMIT)
    max_x = min(render_area.x + max(render_area.width - 1, 0), _CELL_LIMIT)
    return min(cursor_x, max_x)