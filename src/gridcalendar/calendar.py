"""
Calendar Assembly
=================
Builds complete calendar pages from the layout engine.

Why is this file needed?
------------------------
The geometry and renderer know nothing about dates. This module chooses the
labels (years down the side, weeks or months across the top), wires the ISO
week resolver into the per-cell content callback, and returns the primitive
stream together with the layout it was computed from.

Calendars:
    week_calendar: One column per ISO week (1-53), one row per year.
    month_calendar: One column per month, one row per year.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Sequence

from gridcalendar.config import GridOptions, DEFAULT_OPTIONS
from gridcalendar.model.geometry import GridLayout, GridMode, LayoutParams, SeparatorSpec, compute_layout
from gridcalendar.model.labels import MONTH_NAMES_SHORT, number_range
from gridcalendar.model.primitives import DrawPrimitive
from gridcalendar.model.weeks import MAX_WEEK, has_week_53, resolve_week
from gridcalendar.render.renderer import ContentFn, render_grid
from gridcalendar.utils import in2pt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarPage:
    """A rendered calendar: canvas size, geometry and the primitive stream."""
    width: float
    height: float
    layout: GridLayout
    primitives: list[DrawPrimitive]


def week_content_fn(years: Sequence[int]) -> ContentFn:
    """
    Cell callback printing the date range of ISO week `col` of `years[row-1]`.
    Week 53 stays empty in years that only have 52 weeks.
    """
    def content(row: int, col: int) -> Optional[str]:
        year = years[row - 1]
        if col == MAX_WEEK and not has_week_53(year):
            return None
        return resolve_week(year, col)

    return content


def _build(
    width: float,
    height: float,
    top_labels: list[str],
    left_labels: list[str],
    mode: GridMode,
    options: GridOptions,
    separators: Optional[SeparatorSpec],
    content_fn: Optional[ContentFn],
) -> CalendarPage:
    params = LayoutParams.from_options(
        total_width=width,
        total_height=height,
        num_rows=len(left_labels),
        num_cols=len(top_labels),
        options=options,
    )
    layout = compute_layout(params, mode)
    primitives = render_grid(
        layout, top_labels, left_labels,
        separators=separators, content_fn=content_fn, options=options,
    )
    logger.info(
        f"{mode} calendar {len(left_labels)}x{len(top_labels)} - Total: {width:.3f}in x {height:.3f}in, "
        f"Cell: {layout.cell_width:.3f}in x {layout.cell_height:.3f}in"
    )
    return CalendarPage(width=width, height=height, layout=layout, primitives=primitives)


def week_calendar(
    years: Sequence[int],
    width: float,
    height: float,
    options: GridOptions = DEFAULT_OPTIONS,
    mode: GridMode = GridMode.GAPPED,
    separators: Optional[SeparatorSpec] = None,
    show_dates: bool = True,
) -> CalendarPage:
    """
    Week-per-column calendar: 53 columns, one row per year.

    Args:
        years: Row years, top to bottom.
        width: Canvas width in inches.
        height: Canvas height in inches.
        options: Spacing and fonts.
        mode: Grid style.
        separators: Optional heavy lines between groups of years.
        show_dates: Print each week's date range in the bottom-left corner of its cell.
    """
    years = list(years)
    if not years:
        raise ValueError("At least one year is required.")
    content_fn = week_content_fn(years) if show_dates else None
    return _build(
        width, height,
        top_labels=number_range(1, MAX_WEEK),
        left_labels=[str(y) for y in years],
        mode=mode, options=options, separators=separators, content_fn=content_fn,
    )


def month_calendar(
    years: Sequence[int],
    width: float,
    height: float,
    options: GridOptions = DEFAULT_OPTIONS,
    mode: GridMode = GridMode.ROW_BOX,
    separators: Optional[SeparatorSpec] = None,
    content_fn: Optional[ContentFn] = None,
) -> CalendarPage:
    """Month-per-column calendar: 12 columns, one row per year."""
    years = list(years)
    if not years:
        raise ValueError("At least one year is required.")
    return _build(
        width, height,
        top_labels=list(MONTH_NAMES_SHORT),
        left_labels=[str(y) for y in years],
        mode=mode, options=options, separators=separators, content_fn=content_fn,
    )


def crop_command(
    pdf_name: str,
    paper_height: float,
    test_width: float = 8.5,
    test_height: float = 11.0,
) -> str:
    """
    `pdfcrop` command extracting the upper-left `test_width` x `test_height`
    inch section of a large page, for printing a test sheet.
    """
    crop_width = in2pt(test_width)
    crop_height = in2pt(test_height)
    total_height = in2pt(paper_height)
    crop_bottom = total_height - crop_height
    output_name = pdf_name[:-4] + "-test.pdf" if pdf_name.endswith(".pdf") else pdf_name + "-test.pdf"
    return f'pdfcrop --bbox "0 {crop_bottom:.0f} {crop_width:.0f} {total_height:.0f}" {pdf_name} {output_name}'
