"""A Boggle board: a fixed grid of letter tokens.

Most cells hold a single letter, but a token can be longer. The "Qu" face
of a cube is stored as the two-letter token "QU".
"""

from typing import Iterator, Sequence

from boggle.neighbors import Cell, neighbors_for

# Supported board sizes for rolling dice and configuring boards by hand.
SIZE_TO_DIMS = {
    44: (4, 4),
    55: (5, 5),
}


def normalize_token(token: str) -> str:
    token = token.upper()
    return "QU" if token == "Q" else token


class Board:
    _rows: tuple[tuple[str, ...], ...]
    dims: tuple[int, int]

    def __init__(self, rows: Sequence[Sequence[str]]):
        if not rows or not rows[0]:
            raise ValueError("Board must have at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Board rows must all be the same length")
        if not all(token for row in rows for token in row):
            raise ValueError("Board cells must not be empty")
        self._rows = tuple(tuple(token.upper() for token in row) for row in rows)
        self.dims = (len(rows), width)
        self._neighbors = neighbors_for(self.dims)

    @staticmethod
    def from_config(config: str, dims: tuple[int, int]) -> "Board":
        """Build a board from user-entered letters, filled in row by row.

        Either one letter per cell ("CATSORENXXXXXXXX") or at least one
        whitespace-separated token per cell ("C A T S O R E N ..."). A lone Q
        becomes QU. Extra letters or tokens are ignored.
        """
        h, w = dims
        n = h * w
        tokens = config.split()
        if len(tokens) < n:
            tokens = list("".join(tokens))
        if len(tokens) < n:
            raise ValueError(
                f"Board configuration must have {n} letters, got {len(tokens)}"
            )
        tokens = [normalize_token(t) for t in tokens[:n]]
        return Board([tokens[i * w : (i + 1) * w] for i in range(h)])

    @property
    def num_rows(self) -> int:
        return self.dims[0]

    @property
    def num_cols(self) -> int:
        return self.dims[1]

    def __getitem__(self, cell: Cell) -> str:
        row, col = cell
        return self._rows[row][col]

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for row in range(self.num_rows):
            for col in range(self.num_cols):
                yield Cell(row, col)

    def neighbors(self, cell: Cell) -> list[Cell]:
        return self._neighbors[cell]

    def rows(self) -> list[list[str]]:
        return [[*row] for row in self._rows]

    def spell(self, path: Sequence[Cell]) -> str:
        return "".join(self[cell] for cell in path)

    def __eq__(self, other):
        return isinstance(other, Board) and self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return "\n".join(" ".join(token.capitalize() for token in row) for row in self._rows)

    def __repr__(self):
        return f"Board({self.rows()!r})"
