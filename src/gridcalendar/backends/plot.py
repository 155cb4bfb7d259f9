"""
Matplotlib Backend
==================
Draws a primitive stream onto a matplotlib Figure sized to the canvas, for
previews and for PDF output without a TeX installation.

Font specs are TeX size switches (e.g. "\\Huge\\bfseries"); they are mapped to
point sizes of the standard 10pt LaTeX classes.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as RectanglePatch

from gridcalendar.model.primitives import Anchor, DrawPrimitive, Line, LineStyle, Rectangle, Text
from gridcalendar.utils import pt2in

logger = logging.getLogger(__name__)

TEX_FONT_SIZES: dict[str, float] = {
    "tiny": 5.0,
    "scriptsize": 7.0,
    "footnotesize": 8.0,
    "small": 9.0,
    "normalsize": 10.0,
    "large": 12.0,
    "Large": 14.4,
    "LARGE": 17.28,
    "huge": 20.74,
    "Huge": 24.88,
}
DEFAULT_FONT_SIZE = TEX_FONT_SIZES["normalsize"]
CONTENT_INSET_PT = 2.0

_LINESTYLES = {
    LineStyle.SOLID: "-",
    LineStyle.DASHED: "--",
    LineStyle.DOTTED: ":",
}

_TEX_COMMAND = re.compile(r"\\([A-Za-z]+)")


def font_properties(font: str) -> tuple[float, str]:
    """(size in points, weight) for a TeX font spec; unknown commands are ignored."""
    size = DEFAULT_FONT_SIZE
    weight = "normal"
    for command in _TEX_COMMAND.findall(font):
        if command in TEX_FONT_SIZES:
            size = TEX_FONT_SIZES[command]
        elif command in ("bfseries", "textbf"):
            weight = "bold"
    return size, weight


def plot_primitives(
    primitives: Iterable[DrawPrimitive],
    width: float,
    height: float,
    figure: Optional[Figure] = None,
) -> Figure:
    """
    Draw the primitives onto a figure of `width` x `height` inches.

    Args:
        primitives: Stream from `render_grid`, drawn in order (later on top).
        width: Canvas width in inches.
        height: Canvas height in inches.
        figure: Existing figure to draw into; a new one is created if omitted.

    Returns:
        The figure, with a single axes covering the whole canvas in inches.
    """
    fig = figure if figure is not None else Figure(figsize=(width, height))
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0.0, width)
    ax.set_ylim(0.0, height)
    ax.set_aspect("equal")
    ax.set_axis_off()

    inset = pt2in(CONTENT_INSET_PT)
    count = 0
    for zorder, primitive in enumerate(primitives, start=1):
        count = zorder
        match primitive:
            case Rectangle():
                ax.add_patch(RectanglePatch(
                    (primitive.x, primitive.y), primitive.width, primitive.height,
                    fill=False, linewidth=primitive.line_width, edgecolor="black", zorder=zorder,
                ))
            case Line():
                ax.plot(
                    [primitive.x1, primitive.x2], [primitive.y1, primitive.y2],
                    color="black", linewidth=primitive.line_width,
                    linestyle=_LINESTYLES[primitive.style], zorder=zorder,
                )
            case Text():
                size, weight = font_properties(primitive.font)
                if primitive.anchor == Anchor.SOUTH_WEST:
                    ax.text(primitive.x + inset, primitive.y + inset, primitive.content,
                            ha="left", va="bottom", fontsize=size, fontweight=weight, zorder=zorder)
                else:
                    ax.text(primitive.x, primitive.y, primitive.content,
                            ha="center", va="center", fontsize=size, fontweight=weight, zorder=zorder)
            case _:
                raise TypeError(f"Unsupported primitive: {primitive!r}")

    logger.debug(f"Plotted {count} primitives on a {width:.2f}in x {height:.2f}in canvas")
    return fig


def save_pdf(primitives: Iterable[DrawPrimitive], width: float, height: float, filepath: str) -> None:
    """Write the primitives as a single-page PDF of the canvas size."""
    logger.info(f"Saving {width:.2f}in x {height:.2f}in page to: {filepath}")
    fig = plot_primitives(primitives, width, height)
    fig.savefig(filepath, format="pdf")
