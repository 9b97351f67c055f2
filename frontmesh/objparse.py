"""Reading planar vertex groups from Wavefront OBJ files."""

from __future__ import annotations

import os
from typing import Union

Point = tuple[float, float]


def _coordinate(tokens: list[str], index: int) -> float:
    try:
        return float(tokens[index])
    except (IndexError, ValueError):
        return 0.0


def parse_obj(path: Union[str, os.PathLike]) -> list[list[Point]]:
    """Return the x, y vertex coordinates of an OBJ file, split by group.

    Every ``g`` line starts a new group; vertices before the first ``g`` line
    go into an implicit first group. Other statements are ignored, as are the
    z coordinates. Raises OSError when the file cannot be opened.
    """
    groups: list[list[Point]] = []

    with open(path, encoding="utf-8") as file:
        for line in file:
            tokens = line.split()
            if not tokens:
                continue
            prefix = tokens[0]
            if prefix == "v":
                if not groups:
                    groups.append([])
                groups[-1].append((_coordinate(tokens, 1), _coordinate(tokens, 2)))
            elif prefix == "g":
                groups.append([])

    return groups