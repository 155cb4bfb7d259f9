"""
Grid Renderer
=============
Turns a computed GridLayout plus labels into an ordered list of drawing
primitives.

Emission order:
    1. Column labels (top), left to right.
    2. Row labels (left), top to bottom.
    3. Per row: the cell rectangle(s), row-box dividers, then the cell contents.
    4. Separator lines between row groups.

Backends rely on this order for z-ordering, so it must not change between
calls with identical arguments.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from gridcalendar.config import GridOptions, DEFAULT_OPTIONS
from gridcalendar.model.errors import LabelCountMismatch
from gridcalendar.model.geometry import GridLayout, GridMode, SeparatorSpec
from gridcalendar.model.primitives import Anchor, DrawPrimitive, Line, LineStyle, Rectangle, Text

logger = logging.getLogger(__name__)

# Returns the text for cell (row, col), or None/"" to leave it empty
ContentFn = Callable[[int, int], Optional[str]]


def _check_labels(layout: GridLayout, top_labels: Sequence[str], left_labels: Sequence[str]) -> None:
    if len(top_labels) != layout.num_cols:
        raise LabelCountMismatch("column", layout.num_cols, len(top_labels))
    if len(left_labels) != layout.num_rows:
        raise LabelCountMismatch("row", layout.num_rows, len(left_labels))


def _label_primitives(
    layout: GridLayout,
    top_labels: Sequence[str],
    left_labels: Sequence[str],
    options: GridOptions,
) -> list[DrawPrimitive]:
    out: list[DrawPrimitive] = []
    for col, label in enumerate(top_labels, start=1):
        x, y = layout.column_label_anchor(col)
        out.append(Text(x=x, y=y, anchor=Anchor.CENTER, font=options.top_font, content=label))
    for row, label in enumerate(left_labels, start=1):
        x, y = layout.row_label_anchor(row)
        out.append(Text(x=x, y=y, anchor=Anchor.CENTER, font=options.left_font, content=label))
    return out


def _content_primitive(
    content_fn: Optional[ContentFn],
    row: int,
    col: int,
    x: float,
    y: float,
    options: GridOptions,
) -> Optional[Text]:
    if content_fn is None:
        return None
    content = content_fn(row, col)
    if not content:
        return None
    return Text(x=x, y=y, anchor=Anchor.SOUTH_WEST, font=options.content_font, content=content)


def _gapped_row(
    layout: GridLayout,
    row: int,
    content_fn: Optional[ContentFn],
    options: GridOptions,
) -> list[DrawPrimitive]:
    out: list[DrawPrimitive] = []
    line_width = layout.params.line_width
    for col in range(1, layout.num_cols + 1):
        x, y = layout.cell_origin(row, col)
        out.append(Rectangle(x=x, y=y, width=layout.cell_width, height=layout.cell_height, line_width=line_width))
        text = _content_primitive(content_fn, row, col, x, y, options)
        if text is not None:
            out.append(text)
    return out


def _row_box_row(
    layout: GridLayout,
    row: int,
    content_fn: Optional[ContentFn],
    options: GridOptions,
) -> list[DrawPrimitive]:
    row_x, row_y = layout.row_origin(row)
    out: list[DrawPrimitive] = [
        Rectangle(x=row_x, y=row_y, width=layout.row_width, height=layout.cell_height,
                  line_width=layout.params.line_width)
    ]

    divider_width = options.effective_divider_width
    for divider_x in layout.divider_xs():
        out.append(Line(
            x1=divider_x, y1=row_y,
            x2=divider_x, y2=row_y + layout.cell_height,
            line_width=divider_width,
            style=options.divider_style,
        ))

    for col in range(1, layout.num_cols + 1):
        cell_x, cell_y = layout.cell_origin(row, col)
        text = _content_primitive(content_fn, row, col, cell_x, cell_y, options)
        if text is not None:
            out.append(text)
    return out


def _separator_primitives(layout: GridLayout, separators: SeparatorSpec) -> list[DrawPrimitive]:
    x_start = layout.params.left_margin
    x_end = x_start + layout.box_area_width
    out: list[DrawPrimitive] = []
    for row in separators.rows(layout.num_rows):
        y = layout.separator_y(row)
        out.append(Line(x1=x_start, y1=y, x2=x_end, y2=y, line_width=separators.width, style=LineStyle.SOLID))
    return out


def render_grid(
    layout: GridLayout,
    top_labels: Sequence[str],
    left_labels: Sequence[str],
    separators: Optional[SeparatorSpec] = None,
    content_fn: Optional[ContentFn] = None,
    options: GridOptions = DEFAULT_OPTIONS,
) -> list[DrawPrimitive]:
    """
    Produce the drawing primitives for a grid.

    Args:
        layout: Geometry from `compute_layout`; its mode selects the grid style.
        top_labels: One label per column.
        left_labels: One label per row.
        separators: Optional heavy lines between row groups.
        content_fn: Called exactly once per cell, in row-major order, with
                    1-based (row, col). Empty or None results draw nothing.
        options: Fonts and divider style. Spacing comes from the layout.

    Returns:
        The ordered primitive list.

    Raises:
        LabelCountMismatch: If the label counts differ from the layout's
                            column/row counts. Nothing is produced in that case.
        ValueError: If `separators` is out of range.
    """
    _check_labels(layout, top_labels, left_labels)
    if separators is not None:
        separators.validate()

    primitives = _label_primitives(layout, top_labels, left_labels, options)

    row_fn = _gapped_row if layout.mode == GridMode.GAPPED else _row_box_row
    for row in range(1, layout.num_rows + 1):
        primitives.extend(row_fn(layout, row, content_fn, options))

    if separators is not None:
        primitives.extend(_separator_primitives(layout, separators))

    logger.debug(f"Rendered {layout.mode} grid {layout.num_rows}x{layout.num_cols}: {len(primitives)} primitives")
    return primitives
