"""Exceptions raised by the layout engine and the week resolver."""


class GridCalendarError(ValueError):
    """Base class for configuration errors reported by gridcalendar."""


class InvalidWeek(GridCalendarError):
    """Week number outside 1-53."""

    def __init__(self, year: int, week: int):
        self.year = year
        self.week = week
        super().__init__(f"Invalid ISO week {week} for year {year} (expected 1-53).")


class DegenerateGeometry(GridCalendarError):
    """Computed cell width or height is not positive."""

    def __init__(self, cell_width: float, cell_height: float):
        self.cell_width = cell_width
        self.cell_height = cell_height
        super().__init__(
            f"Degenerate grid geometry: cell size {cell_width:.4f} x {cell_height:.4f}. "
            "Increase the canvas size or reduce margins, gap or cell counts."
        )


class LabelCountMismatch(GridCalendarError):
    """Number of labels does not match the configured number of rows or columns."""

    def __init__(self, axis: str, expected: int, got: int):
        self.axis = axis
        self.expected = expected
        self.got = got
        super().__init__(f"Expected {expected} {axis} labels, got {got}.")
