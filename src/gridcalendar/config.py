"""
Configuration & Defaults
========================
This module is the central registry for the default grid options.

Why is this file needed?
------------------------
1. Defaults: Fonts, margins, gap and stroke widths are defined once instead of
   being repeated by every drawing call.
2. Overrides: Callers derive a modified copy with `GridOptions.merged(...)`
   rather than passing loose option tables around.

Exports:
    GridOptions: Scalar drawing options with their defaults.
    DEFAULT_OPTIONS: The shared default instance.
"""
from __future__ import annotations

from dataclasses import dataclass, replace, fields
import logging
from typing import Any, Optional

from gridcalendar.model.primitives import LineStyle

logger = logging.getLogger(__name__)

# Font specs are opaque strings handed to the backend (TeX size switches for TikZ).
DEFAULT_LABEL_FONT: str = r"\Huge\bfseries"
DEFAULT_CONTENT_FONT: str = ""


@dataclass(frozen=True)
class GridOptions:
    """
    Scalar options shared by both grid styles.

    Lengths are in inches, stroke widths in points.
    """
    top_font: str = DEFAULT_LABEL_FONT
    left_font: str = DEFAULT_LABEL_FONT
    content_font: str = DEFAULT_CONTENT_FONT
    left_margin: float = 1.0
    header_height: float = 0.4
    gap: float = 0.06
    line_width: float = 1.2

    # Row-box dividers; width falls back to line_width
    divider_style: LineStyle = LineStyle.DASHED
    divider_width: Optional[float] = None

    def merged(self, **overrides: Any) -> GridOptions:
        """
        Return a copy with the given fields replaced.

        `None` values are ignored so callers can forward optional arguments
        unchanged.

        Raises:
            ValueError: If an override names an unknown option.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown grid option(s): {', '.join(unknown)}")

        changes = {k: v for k, v in overrides.items() if v is not None}
        if changes:
            logger.debug(f"Overriding grid options: {changes}")
        return replace(self, **changes)

    @property
    def effective_divider_width(self) -> float:
        return self.line_width if self.divider_width is None else self.divider_width


DEFAULT_OPTIONS: GridOptions = GridOptions()
