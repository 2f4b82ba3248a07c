"""
Shortest paths on a 2-D occupancy grid.

Cells are vertices and edges are implicit: each cell connects to its
in-bounds, walkable neighbours up, down, left and right. No Graph object is
built; visited and parent live in numpy arrays shaped like the grid.
"""

from collections import deque
from typing import Deque, List, Sequence, Tuple, Union
import logging

import numpy as np

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

WALKABLE = 0
OBSTACLE = 1

# Expansion order: up, down, left, right. Fixes tie-breaking between
# equal-length paths.
GRID_DIRECTIONS: Sequence[Cell] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def grid_shortest_path(
    grid: Union[Sequence[Sequence[int]], np.ndarray], start: Cell, target: Cell
) -> List[Cell]:
    """
    Fewest-step 4-connected path between two walkable cells.

    Args:
        grid: 2-D array-like of cell values (nested lists or np.ndarray);
            WALKABLE cells can be entered, anything else blocks.
        start: (row, col) of the first cell.
        target: (row, col) of the last cell.

    Returns:
        [(row, col), ...] from start to target inclusive; [start] when
        start == target; [] when the grid is empty or not rectangular, an
        endpoint is out of bounds or an obstacle, or no path exists.
    """
    try:
        cells = np.asarray(grid)
    except ValueError:
        # ragged rows
        logger.debug("grid_shortest_path: grid is not rectangular")
        return []

    if cells.ndim != 2 or cells.size == 0:
        return []

    rows, cols = cells.shape
    start_row, start_col = start
    target_row, target_col = target

    if not (
        _in_bounds(start_row, start_col, rows, cols)
        and _in_bounds(target_row, target_col, rows, cols)
    ):
        return []
    # Endpoints only reject OBSTACLE; expansion below only enters WALKABLE.
    if (
        cells[start_row, start_col] == OBSTACLE
        or cells[target_row, target_col] == OBSTACLE
    ):
        return []

    if (start_row, start_col) == (target_row, target_col):
        return [(int(start_row), int(start_col))]

    visited = np.zeros((rows, cols), dtype=bool)
    parent = np.full((rows, cols, 2), -1, dtype=np.int64)
    queue: Deque[Cell] = deque([(start_row, start_col)])
    visited[start_row, start_col] = True

    while queue:
        row, col = queue.popleft()

        if row == target_row and col == target_col:
            path = _walk_parents(parent, target_row, target_col)
            logger.debug(
                "grid_shortest_path: %s -> %s in %d steps", start, target, len(path) - 1
            )
            return path

        for d_row, d_col in GRID_DIRECTIONS:
            next_row = row + d_row
            next_col = col + d_col
            if (
                _in_bounds(next_row, next_col, rows, cols)
                and not visited[next_row, next_col]
                and cells[next_row, next_col] == WALKABLE
            ):
                visited[next_row, next_col] = True
                parent[next_row, next_col] = (row, col)
                queue.append((next_row, next_col))

    logger.debug("grid_shortest_path: no path %s -> %s", start, target)
    return []


def _in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    return 0 <= row < rows and 0 <= col < cols


def _walk_parents(parent: np.ndarray, row: int, col: int) -> List[Cell]:
    path: List[Cell] = []
    while row != -1 and col != -1:
        path.append((int(row), int(col)))
        row, col = parent[row, col]
    path.reverse()
    return path
