"""Ordered boundary loop of a rectangular vertex grid."""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple

from mountain.exceptions import ConfigurationError, MeshGenerationError

logger = logging.getLogger(__name__)

PRIMARY = "primary"
SECONDARY = "secondary"


class BoundaryRule(NamedTuple):
    """A classification predicate and the list it sends matches to."""

    name: str
    target: str
    matches: Callable[[int, int, int, int], bool]


# Evaluated in order, first match wins. Corner vertices satisfy several
# predicates, so the order decides which list they land in.
BOUNDARY_RULES: tuple[BoundaryRule, ...] = (
    BoundaryRule(
        "top_row",
        PRIMARY,
        lambda n, row, cols, rows: row == 0,
    ),
    BoundaryRule(
        "right_column",
        PRIMARY,
        lambda n, row, cols, rows: n == (row + 1) * cols - 1,
    ),
    BoundaryRule(
        "left_column_or_bottom_row",
        SECONDARY,
        lambda n, row, cols, rows: n % cols == 0 or row == rows - 1,
    ),
)


def classify_vertex(n: int, cols: int, rows: int) -> str | None:
    """Return the list a vertex number is assigned to, or None if interior.

    Args:
        n: Row-major vertex number.
        cols: Number of vertex columns.
        rows: Number of vertex rows.

    Returns:
        ``"primary"``, ``"secondary"`` or None.
    """
    row = n // cols
    for rule in BOUNDARY_RULES:
        if rule.matches(n, row, cols, rows):
            return rule.target
    return None


def extract_perimeter(
    cols: int,
    rows: int,
    vertex_count: int | None = None,
) -> tuple[int, ...]:
    """Return the boundary vertex numbers of a grid as one closed loop.

    Vertices are scanned in row-major order and sorted into two lists by
    :data:`BOUNDARY_RULES`. The primary list collects the top row left to
    right followed by the right column top to bottom. The secondary list
    collects the left column top to bottom together with the rest of the
    bottom row; it is appended reversed, so the loop returns along the
    bottom row right to left and up the left column. With row 0 at the top
    of the plane the loop is clockwise seen from +z and starts at vertex 0.

    Args:
        cols: Number of vertex columns (at least 2).
        rows: Number of vertex rows (at least 2).
        vertex_count: Total number of grid vertices. If given, it must equal
            ``cols * rows``.

    Returns:
        Tuple of ``2 * cols + 2 * rows - 4`` distinct vertex numbers.

    Raises:
        ConfigurationError: If the grid is smaller than 2x2 vertices.
        MeshGenerationError: If vertex_count does not match the grid.
    """
    if cols < 2 or rows < 2:
        raise ConfigurationError(
            f"Perimeter needs at least 2x2 vertices, got {cols}x{rows}"
        )
    if vertex_count is None:
        vertex_count = cols * rows
    elif vertex_count != cols * rows:
        raise MeshGenerationError(
            f"vertex_count ({vertex_count}) does not match "
            f"{cols}x{rows} grid"
        )

    primary: list[int] = []
    secondary: list[int] = []
    for n in range(vertex_count):
        target = classify_vertex(n, cols, rows)
        if target == PRIMARY:
            primary.append(n)
        elif target == SECONDARY:
            secondary.append(n)

    loop = tuple(primary + secondary[::-1])
    logger.debug(f"Extracted perimeter of {len(loop)} vertices from {cols}x{rows} grid")
    return loop
