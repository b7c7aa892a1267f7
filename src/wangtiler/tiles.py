# Edge-colour encoding of the fixed 8-tile Wang set, and the tile matcher.
#
# bit2 = top colour, bit1 = left colour, bit0 = parity.
# The tileset is built so that top^bottom == left^right == parity.

from typing import Tuple

from .rng import RangeSource

NUM_TILES = 8
MAX_TILE = NUM_TILES - 1


def check_tile(tile: int) -> int:
    if not (0 <= tile <= MAX_TILE):
        raise ValueError(f"tile index {tile} outside 0..{MAX_TILE}")
    return tile


def top_color(tile: int) -> int:
    return (tile >> 2) & 1

def left_color(tile: int) -> int:
    return (tile >> 1) & 1

def parity(tile: int) -> int:
    return tile & 1

def bottom_color(tile: int) -> int:
    return top_color(tile) ^ parity(tile)

def right_color(tile: int) -> int:
    return left_color(tile) ^ parity(tile)


def edges(tile: int) -> Tuple[int, int, int, int]:
    """Edge colours of a tile, clockwise from the top: (top, right, bottom, left)."""
    check_tile(tile)
    return top_color(tile), right_color(tile), bottom_color(tile), left_color(tile)


def make_tile(top: int, left: int, bit: int) -> int:
    return ((top & 1) << 2) | ((left & 1) << 1) | (bit & 1)


def match_tile(above: int, left: int, bit: int) -> int:
    """
    Tile whose top edge matches the bottom of `above` and whose left edge
    matches the right of `left`. `bit` picks between the two candidates.
    """
    check_tile(above)
    check_tile(left)
    if bit not in (0, 1):
        raise ValueError(f"random bit must be 0 or 1, got {bit}")
    return make_tile(bottom_color(above), right_color(left), bit)


def random_tile(above: int, left: int, rng: RangeSource) -> int:
    return match_tile(above, left, rng.randn(0, 1))
