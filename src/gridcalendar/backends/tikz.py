"""
TikZ Backend
============
Serializes a primitive stream to a `tikzpicture` environment for LuaLaTeX.

The picture uses `x=1in, y=1in`, so primitive coordinates (inches) are
written unchanged. Stroke widths are written in points.
"""
from __future__ import annotations

import logging
from typing import Iterable

from gridcalendar.model.primitives import Anchor, DrawPrimitive, Line, LineStyle, Rectangle, Text

logger = logging.getLogger(__name__)

PICTURE_BEGIN = r"\noindent\begin{tikzpicture}[x=1in, y=1in]"
PICTURE_END = r"\end{tikzpicture}"
CONTENT_INNER_SEP = "2pt"


def _node_options(text: Text) -> str:
    opts: list[str] = []
    if text.anchor == Anchor.SOUTH_WEST:
        opts.append("anchor=south west")
        opts.append(f"inner sep={CONTENT_INNER_SEP}")
    if text.font:
        opts.append(f"font={text.font}")
    return f"[{', '.join(opts)}]" if opts else ""


def primitive_to_tikz(primitive: DrawPrimitive) -> str:
    """One TikZ command for one primitive."""
    match primitive:
        case Rectangle(x=x, y=y, width=w, height=h, line_width=lw):
            return f"\\draw[line width={lw:.1f}pt] ({x:.4f}, {y:.4f}) rectangle ({x + w:.4f}, {y + h:.4f});"
        case Line(x1=x1, y1=y1, x2=x2, y2=y2, line_width=lw, style=style):
            style_opt = "" if style == LineStyle.SOLID else f"{style}, "
            return f"\\draw[{style_opt}line width={lw:.1f}pt] ({x1:.4f}, {y1:.4f}) -- ({x2:.4f}, {y2:.4f});"
        case Text(x=x, y=y, content=content):
            return f"\\node{_node_options(primitive)} at ({x:.4f}, {y:.4f}) {{{content}}};"
        case _:
            raise TypeError(f"Unsupported primitive: {primitive!r}")


def to_tikz(primitives: Iterable[DrawPrimitive]) -> str:
    """Complete tikzpicture source, one command per line, in stream order."""
    lines = [PICTURE_BEGIN]
    lines.extend(primitive_to_tikz(p) for p in primitives)
    lines.append(PICTURE_END)
    logger.debug(f"Serialized {len(lines) - 2} primitives to TikZ")
    return "\n".join(lines)
