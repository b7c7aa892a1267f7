# Tab-separated grids: one row of tile indices per line.

import csv
import os
from typing import List, Sequence


def write_tsv(mat: Sequence[Sequence[int]], path: str, header: bool = False) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t")
        # An empty grid has no columns to number.
        if header and mat:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)


def is_header_row(row: Sequence[int]) -> bool:
    return list(row) == list(range(len(row)))


def read_tsv(path: str, header: bool = False) -> List[List[int]]:
    """
    Read a grid back. With header=True a leading row of column numbers
    (0, 1, 2, ...) is dropped; a first row that is not one is kept as data.
    """
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if not line:
                continue
            try:
                rows.append([int(x) for x in line.split("\t")])
            except ValueError:
                raise ValueError(f"{path}: non-integer cell in {line!r}") from None
    if header and rows and is_header_row(rows[0]):
        rows = rows[1:]
    if rows and any(len(r) != len(rows[0]) for r in rows):
        raise ValueError(f"{path}: rows have differing lengths")
    return rows
