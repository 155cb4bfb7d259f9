"""Label helpers for calendar rows and columns."""

MONTH_NAMES: list[str] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MONTH_NAMES_SHORT: list[str] = [name[:3] for name in MONTH_NAMES]


def number_range(start: int, count: int) -> list[str]:
    """`count` consecutive integers starting at `start`, as strings."""
    return [str(start + i) for i in range(count)]
