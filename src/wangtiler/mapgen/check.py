# src/wangtiler/mapgen/check.py
# Seam checks over a finished tiling (any list of row lists).

from typing import List, Sequence, Tuple

from ..tiles import MAX_TILE, bottom_color, left_color, right_color, top_color

Mismatch = Tuple[int, int, str]   # (row, col, "left" | "top" | "range")


def edge_mismatches(matrix: Sequence[Sequence[int]]) -> List[Mismatch]:
    """
    Every cell whose value is not a tile index ("range"), whose left edge
    disagrees with its left neighbour's right edge ("left"), or whose top edge
    disagrees with the bottom edge of the tile above ("top").
    """
    out: List[Mismatch] = []
    bad = set()
    for i, row in enumerate(matrix):
        for j, t in enumerate(row):
            if not (0 <= t <= MAX_TILE):
                out.append((i, j, "range"))
                bad.add((i, j))

    for i, row in enumerate(matrix):
        for j, t in enumerate(row):
            if (i, j) in bad:
                continue
            if j > 0 and (i, j - 1) not in bad:
                if right_color(row[j - 1]) != left_color(t):
                    out.append((i, j, "left"))
            if i > 0 and j < len(matrix[i - 1]) and (i - 1, j) not in bad:
                if bottom_color(matrix[i - 1][j]) != top_color(t):
                    out.append((i, j, "top"))
    return out


def is_seamless(matrix: Sequence[Sequence[int]]) -> bool:
    return not edge_mismatches(matrix)
