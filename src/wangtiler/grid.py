from dataclasses import dataclass
from typing import Iterator, List


@dataclass
class Grid:
    """Row-major cell buffer: cell (row, col) lives at buf[row * width + col]."""
    buf: List[int]
    width: int
    height: int

    @classmethod
    def empty(cls, width: int, height: int, fill: int = 0) -> "Grid":
        return cls(buf=[fill] * (width * height), width=width, height=height)

    def idx(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) outside {self.width}x{self.height} grid")
        return row * self.width + col

    def get(self, row: int, col: int) -> int:
        return self.buf[self.idx(row, col)]

    def set(self, row: int, col: int, v: int) -> None:
        self.buf[self.idx(row, col)] = v

    def rows(self) -> Iterator[List[int]]:
        for r in range(self.height):
            start = r * self.width
            yield self.buf[start:start + self.width]

    def as_matrix(self) -> List[List[int]]:
        return list(self.rows())
