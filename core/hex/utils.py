"""
Purpose: Offset-coordinate hex math (neighbors, adjacency) for a flat-top grid.
Dependencies: None.
Ext Hooks: Add distance for hint arrows toward the goal.
"""

# Flat-top, column-offset layout: odd columns sit half a row lower, so the
# diagonal neighbours of an even column are one row up and those of an odd
# column are one row down.
EVEN_COL_NEIGHBORS = [(1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, -1)]
ODD_COL_NEIGHBORS = [(1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (-1, 1)]


def neighbor_offsets(col):
    return EVEN_COL_NEIGHBORS if col % 2 == 0 else ODD_COL_NEIGHBORS


def get_neighbors(col, row):
    """Six (col, row) candidates around a tile; callers filter by bounds."""
    return [(col + dc, row + dr) for dc, dr in neighbor_offsets(col)]


def are_adjacent(col1, row1, col2, row2):
    return (col2 - col1, row2 - row1) in neighbor_offsets(col1)


def in_bounds(col, row, cols, rows):
    return 0 <= col < cols and 0 <= row < rows
