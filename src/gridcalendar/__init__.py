"""
gridcalendar: geometry and drawing primitives for large printable grid calendars.
"""
from gridcalendar.config import GridOptions, DEFAULT_OPTIONS
from gridcalendar.model.errors import DegenerateGeometry, GridCalendarError, InvalidWeek, LabelCountMismatch
from gridcalendar.model.geometry import CellGeometry, GridLayout, GridMode, LayoutParams, SeparatorSpec, compute_layout
from gridcalendar.model.primitives import Anchor, DrawPrimitive, Line, LineStyle, Rectangle, Text
from gridcalendar.model.weeks import WeekRange, has_week_53, resolve_week, week_range, weeks_in_year
from gridcalendar.render.renderer import ContentFn, render_grid

__all__ = [
    "GridOptions", "DEFAULT_OPTIONS",
    "GridCalendarError", "InvalidWeek", "DegenerateGeometry", "LabelCountMismatch",
    "CellGeometry", "GridLayout", "GridMode", "LayoutParams", "SeparatorSpec", "compute_layout",
    "Anchor", "DrawPrimitive", "Line", "LineStyle", "Rectangle", "Text",
    "WeekRange", "has_week_53", "resolve_week", "week_range", "weeks_in_year",
    "ContentFn", "render_grid",
]
