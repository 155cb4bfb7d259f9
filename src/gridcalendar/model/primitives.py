"""
Drawing Primitives.

The renderer's only output is an ordered list of these values. They carry no
backend syntax; a backend (TikZ, matplotlib, ...) decides how to draw them.
Coordinates are in inches with the origin at the bottom-left of the canvas,
stroke widths are in points.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import Union
import math


class Anchor(StrEnum):
    """Which point of the text box sits at (x, y)."""
    CENTER = "center"
    SOUTH_WEST = "south west"


class LineStyle(StrEnum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


@dataclass(frozen=True)
class Point:
    """A point in the drawing plane."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


@dataclass(frozen=True)
class Rectangle:
    """An outlined axis-aligned rectangle given by its bottom-left corner."""
    x: float
    y: float
    width: float
    height: float
    line_width: float

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def corner(self) -> Point:
        """Top-right corner."""
        return Point(self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class Line:
    """A straight stroke between two points."""
    x1: float
    y1: float
    x2: float
    y2: float
    line_width: float
    style: LineStyle = LineStyle.SOLID

    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class Text:
    """A positioned piece of text. `font` is an opaque backend font spec."""
    x: float
    y: float
    anchor: Anchor
    font: str
    content: str

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


# Union type for list handling
DrawPrimitive = Union[Rectangle, Line, Text]
