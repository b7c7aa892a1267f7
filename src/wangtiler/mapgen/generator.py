# src/wangtiler/mapgen/generator.py
# Row-major Wang tiling of a width x height grid.

import logging
from typing import Callable, Iterator, List, Optional

from ..config import DEFAULTS, TilerConfig
from ..grid import Grid
from ..rng import PMRandom, RangeSource
from ..tiles import MAX_TILE, random_tile

log = logging.getLogger(__name__)

# (above, left, rng) -> tile index
Matcher = Callable[[int, int, RangeSource], int]


def _check_dims(width: int, height: int) -> None:
    for name, v in (("width", width), ("height", height)):
        if isinstance(v, bool) or not isinstance(v, int) or v < 1:
            raise ValueError(f"{name} must be a positive integer, got {v!r}")


class WangTiler:
    """
    Pseudo-random grid of tile indices in which every shared edge matches.

    The origin is a free draw. Cells on row 0 and column 0 have only one real
    neighbour; the missing one is replaced by a fresh random tile index, drawn
    before the matcher's own bit. Interior cells draw just the bit.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[RangeSource] = None,
        matcher: Matcher = random_tile,
    ):
        _check_dims(width, height)
        self.rng = rng if rng is not None else PMRandom.from_clock()
        self.matcher = matcher
        self.grid = Grid.empty(width, height)
        self.generated = False

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def resize(self, width: int, height: int) -> None:
        _check_dims(width, height)
        log.info("resize %dx%d -> %dx%d", self.width, self.height, width, height)
        self.grid = Grid.empty(width, height)
        self.generated = False

    def generate(self) -> None:
        g, rng, match = self.grid, self.rng, self.matcher
        log.debug("generating %dx%d tiling", g.width, g.height)

        g.set(0, 0, rng.randn(0, MAX_TILE))

        for j in range(1, g.width):
            g.set(0, j, match(rng.randn(0, MAX_TILE), g.get(0, j - 1), rng))

        for i in range(1, g.height):
            g.set(i, 0, match(g.get(i - 1, 0), rng.randn(0, MAX_TILE), rng))

            for j in range(1, g.width):
                g.set(i, j, match(g.get(i - 1, j), g.get(i, j - 1), rng))

        self.generated = True

    def tile_at(self, row: int, col: int) -> int:
        return self.grid.get(row, col)

    def rows(self) -> Iterator[List[int]]:
        return self.grid.rows()

    def as_matrix(self) -> List[List[int]]:
        return self.grid.as_matrix()


def generate_grid(
    width: int = DEFAULTS.width,
    height: int = DEFAULTS.height,
    seed: Optional[int] = None,
) -> List[List[int]]:
    cfg = TilerConfig(width, height, seed)
    tiler = WangTiler(cfg.width, cfg.height, cfg.make_rng())
    tiler.generate()
    return tiler.as_matrix()
