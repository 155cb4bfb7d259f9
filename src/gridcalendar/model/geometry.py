"""
Grid Geometry
=============
Partitions a canvas into a uniform matrix of cells.

Canvas layout (y grows upwards, origin bottom-left)::

    +-------------+--------+--------+--------+   <- total_height
    |             | col 1  | col 2  | col 3  |   header_height
    +-------------+--------+--------+--------+
    |   row 1     | cell   |  cell  |  cell  |
    |             +--------+--------+--------+
    |   row 2     | cell   |  cell  |  cell  |
    +-------------+--------+--------+--------+   <- 0
    |<- left_margin ->|<---- box area ------>|

Two partition modes are supported:

* GAPPED: every cell is its own rectangle, separated horizontally and
  vertically by `gap`.
* ROW_BOX: every row is one rectangle, split into columns by divider lines.
  Rows are still separated vertically by `gap`; columns have no gap.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Iterator, TYPE_CHECKING

import numpy as np

from gridcalendar.config import GridOptions, DEFAULT_OPTIONS
from gridcalendar.model.errors import DegenerateGeometry

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class GridMode(StrEnum):
    GAPPED = "gapped"
    ROW_BOX = "rowbox"


@dataclass(frozen=True)
class LayoutParams:
    """
    Canvas size and spacing of one grid. Lengths in inches, line_width in points.
    """
    total_width: float
    total_height: float
    num_rows: int
    num_cols: int
    left_margin: float = DEFAULT_OPTIONS.left_margin
    header_height: float = DEFAULT_OPTIONS.header_height
    gap: float = DEFAULT_OPTIONS.gap
    line_width: float = DEFAULT_OPTIONS.line_width

    @classmethod
    def from_options(
        cls,
        total_width: float,
        total_height: float,
        num_rows: int,
        num_cols: int,
        options: GridOptions = DEFAULT_OPTIONS,
    ) -> LayoutParams:
        return cls(
            total_width=total_width,
            total_height=total_height,
            num_rows=num_rows,
            num_cols=num_cols,
            left_margin=options.left_margin,
            header_height=options.header_height,
            gap=options.gap,
            line_width=options.line_width,
        )

    def validate(self) -> None:
        """
        Check field ranges. Sizes that merely leave no room for the cells are
        not rejected here; `compute_layout` reports them as DegenerateGeometry.

        Raises:
            ValueError: If a field is out of its allowed range.
        """
        for name in ("num_rows", "num_cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise ValueError(f"'{name}' must be a positive integer, got {value!r}.")
        for name in ("total_width", "total_height", "line_width"):
            if not getattr(self, name) > 0.0:
                raise ValueError(f"'{name}' must be positive, got {getattr(self, name)!r}.")
        for name in ("left_margin", "header_height", "gap"):
            if not getattr(self, name) >= 0.0:
                raise ValueError(f"'{name}' must be non-negative, got {getattr(self, name)!r}.")

    @property
    def box_area_width(self) -> float:
        return self.total_width - self.left_margin

    @property
    def box_area_height(self) -> float:
        return self.total_height - self.header_height


@dataclass(frozen=True)
class SeparatorSpec:
    """
    Heavy horizontal line drawn in the gap after every `interval`-th row,
    starting after `start_row`. An interval of 0 disables separators.
    """
    interval: int = 0
    start_row: int = 1
    width: float = 3.0

    def validate(self) -> None:
        if self.interval < 0:
            raise ValueError(f"Separator interval must be >= 0, got {self.interval}.")
        if self.start_row < 1:
            raise ValueError(f"Separator start_row must be >= 1, got {self.start_row}.")
        if not self.width > 0.0:
            raise ValueError(f"Separator width must be positive, got {self.width}.")

    def rows(self, num_rows: int) -> list[int]:
        """Rows followed by a separator. The last row never is, since nothing follows it."""
        if self.interval == 0:
            return []
        return list(range(self.start_row, num_rows, self.interval))


@dataclass(frozen=True)
class CellGeometry:
    """One grid cell; (x, y) is its bottom-left corner."""
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass(frozen=True)
class GridLayout:
    """
    Result of `compute_layout`. All positions are derived from the stored
    cell size, so the layout is immutable and cheap to query.
    """
    params: LayoutParams
    mode: GridMode
    cell_width: float
    cell_height: float

    @property
    def num_rows(self) -> int:
        return self.params.num_rows

    @property
    def num_cols(self) -> int:
        return self.params.num_cols

    @property
    def gap(self) -> float:
        return self.params.gap

    @property
    def box_area_width(self) -> float:
        return self.params.box_area_width

    @property
    def box_area_height(self) -> float:
        return self.params.box_area_height

    @property
    def column_pitch(self) -> float:
        """Horizontal distance between the origins of adjacent columns."""
        if self.mode == GridMode.GAPPED:
            return self.cell_width + self.gap
        return self.cell_width

    @property
    def row_pitch(self) -> float:
        """Vertical distance between the origins of adjacent rows."""
        return self.cell_height + self.gap

    @property
    def row_width(self) -> float:
        """Width of a whole row box (ROW_BOX mode) or of the box area."""
        return self.box_area_width

    def _check_row(self, row: int) -> None:
        if not 1 <= row <= self.num_rows:
            raise IndexError(f"Row {row} out of range 1..{self.num_rows}.")

    def _check_col(self, col: int) -> None:
        if not 1 <= col <= self.num_cols:
            raise IndexError(f"Column {col} out of range 1..{self.num_cols}.")

    def column_x(self, col: int) -> float:
        self._check_col(col)
        return self.params.left_margin + (col - 1) * self.column_pitch

    def row_y(self, row: int) -> float:
        self._check_row(row)
        return self.box_area_height - (row - 1) * self.row_pitch - self.cell_height

    def cell_origin(self, row: int, col: int) -> tuple[float, float]:
        """Bottom-left corner of cell (row, col); both indices are 1-based, row 1 on top."""
        return self.column_x(col), self.row_y(row)

    def cell(self, row: int, col: int) -> CellGeometry:
        x, y = self.cell_origin(row, col)
        return CellGeometry(row=row, col=col, x=x, y=y, width=self.cell_width, height=self.cell_height)

    def cells(self) -> Iterator[CellGeometry]:
        """All cells in row-major order."""
        for row in range(1, self.num_rows + 1):
            for col in range(1, self.num_cols + 1):
                yield self.cell(row, col)

    def row_origin(self, row: int) -> tuple[float, float]:
        """Bottom-left corner of the whole row box."""
        return self.params.left_margin, self.row_y(row)

    def divider_xs(self) -> list[float]:
        """x of the internal column boundaries (ROW_BOX only, columns 2..n)."""
        if self.mode != GridMode.ROW_BOX:
            return []
        return [self.params.left_margin + (col - 1) * self.cell_width for col in range(2, self.num_cols + 1)]

    def column_label_anchor(self, col: int) -> tuple[float, float]:
        self._check_col(col)
        y = self.params.total_height - self.params.header_height / 2
        if self.mode == GridMode.GAPPED:
            x = self.params.left_margin + (col - 1) * (self.cell_width + self.gap) + self.cell_width / 2
        else:
            x = self.params.left_margin + (col - 0.5) * self.cell_width
        return x, y

    def row_label_anchor(self, row: int) -> tuple[float, float]:
        self._check_row(row)
        x = self.params.left_margin / 2
        y = self.box_area_height - (row - 1) * self.row_pitch - self.cell_height / 2
        return x, y

    def separator_y(self, row: int) -> float:
        """Middle of the gap below `row`."""
        self._check_row(row)
        return self.box_area_height - row * self.row_pitch + self.gap / 2

    def column_xs(self) -> npt.NDArray[np.float64]:
        return self.params.left_margin + np.arange(self.num_cols, dtype=np.float64) * self.column_pitch

    def row_ys(self) -> npt.NDArray[np.float64]:
        return self.box_area_height - np.arange(self.num_rows, dtype=np.float64) * self.row_pitch - self.cell_height

    def covered_width(self) -> float:
        """Width spanned by the cells and the gaps between them."""
        if self.mode == GridMode.GAPPED:
            return self.num_cols * self.cell_width + (self.num_cols - 1) * self.gap
        return self.num_cols * self.cell_width

    def covered_height(self) -> float:
        return self.num_rows * self.cell_height + (self.num_rows - 1) * self.gap

    def fits_canvas(self, tol: float = 1e-9) -> bool:
        return bool(
            np.isclose(self.covered_width(), self.box_area_width, atol=tol)
            and np.isclose(self.covered_height(), self.box_area_height, atol=tol)
        )


def compute_layout(params: LayoutParams, mode: GridMode | str = GridMode.GAPPED) -> GridLayout:
    """
    Compute the cell size for `params` in the given partition mode.

    Args:
        params: Canvas size, spacing and cell counts.
        mode: GridMode.GAPPED (independent cells) or GridMode.ROW_BOX
              (one rectangle per row with internal dividers).

    Returns:
        The immutable GridLayout.

    Raises:
        ValueError: If a parameter is out of range.
        DegenerateGeometry: If the computed cell width or height is not positive.
    """
    params.validate()
    mode = GridMode(mode)

    box_area_width = params.box_area_width
    box_area_height = params.box_area_height

    if mode == GridMode.GAPPED:
        cell_width = (box_area_width - (params.num_cols - 1) * params.gap) / params.num_cols
    else:
        cell_width = box_area_width / params.num_cols
    cell_height = (box_area_height - (params.num_rows - 1) * params.gap) / params.num_rows

    if cell_width <= 0.0 or cell_height <= 0.0:
        raise DegenerateGeometry(cell_width, cell_height)

    logger.debug(
        f"{mode} grid - Total: {params.total_width:.3f}in x {params.total_height:.3f}in, "
        f"Cell: {cell_width:.3f}in x {cell_height:.3f}in"
    )
    return GridLayout(params=params, mode=mode, cell_width=cell_width, cell_height=cell_height)
