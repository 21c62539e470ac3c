import functools
from typing import NamedTuple


class Cell(NamedTuple):
    row: int
    col: int


def is_adjacent(a: Cell | None, b: Cell | None) -> bool:
    """Are these two cells touching horizontally, vertically or diagonally?

    None means "no previous cell" and is adjacent to everything.
    """
    if a is None or b is None:
        return True
    if a == b:
        return False
    return abs(a.row - b.row) <= 1 and abs(a.col - b.col) <= 1


@functools.cache
def neighbors_for(dims: tuple[int, int]) -> dict[Cell, list[Cell]]:
    h, w = dims
    ns: dict[Cell, list[Cell]] = {}
    for x in range(0, h):
        for y in range(0, w):
            n = []
            for dx in range(-1, 2):
                nx = x + dx
                if nx < 0 or nx >= h:
                    continue
                for dy in range(-1, 2):
                    ny = y + dy
                    if ny < 0 or ny >= w:
                        continue
                    if dx == 0 and dy == 0:
                        continue
                    n.append(Cell(nx, ny))
            n.sort()
            ns[Cell(x, y)] = n
    return ns
