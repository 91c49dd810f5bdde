"""An immutable grid of uppercase letters.

The Qu tile is stored as the single letter "Q"; searches expand it to "QU".
"""

from typing import Sequence


def parse_cell(token: str) -> str:
    if token in ("QU", "Qu"):
        return "Q"
    if len(token) != 1 or not "A" <= token <= "Z":
        raise ValueError(f"Invalid board cell: {token!r}")
    return token


class Board:
    _rows: int
    _cols: int
    _cells: tuple[str, ...]

    def __init__(self, grid: Sequence[Sequence[str]]):
        if not grid or not grid[0]:
            raise ValueError("Board must have at least one cell")
        cols = len(grid[0])
        for row in grid:
            if len(row) != cols:
                raise ValueError(f"Board rows must all have {cols} cells: {row!r}")
        self._rows = len(grid)
        self._cols = cols
        self._cells = tuple(parse_cell(token) for row in grid for token in row)

    def rows(self):
        return self._rows

    def cols(self):
        return self._cols

    def dims(self) -> tuple[int, int]:
        return self._rows, self._cols

    def letter(self, row: int, col: int) -> str:
        assert 0 <= row < self._rows and 0 <= col < self._cols
        return self._cells[row * self._cols + col]

    def letters(self) -> str:
        """All the cells in row-major order, e.g. "CATS" for a 2x2 board."""
        return "".join(self._cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.dims() == other.dims() and self._cells == other._cells

    def __hash__(self):
        return hash((self.dims(), self._cells))

    def __repr__(self):
        return f"Board.from_letters({self.letters()!r}, {self.dims()!r})"

    def __str__(self):
        lines = [f"{self._rows} {self._cols}"]
        for r in range(self._rows):
            row = self._cells[r * self._cols : (r + 1) * self._cols]
            lines.append(" ".join("Qu" if let == "Q" else let for let in row))
        return "\n".join(lines)

    @staticmethod
    def from_letters(letters: str, dims: tuple[int, int]) -> "Board":
        rows, cols = dims
        if len(letters) != rows * cols:
            raise ValueError(f"Expected {rows * cols} letters for {rows}x{cols}, got {letters!r}")
        return Board([letters[r * cols : (r + 1) * cols] for r in range(rows)])

    @staticmethod
    def from_file(path: str) -> "Board":
        with open(path) as f:
            return parse_board(f.read())


def parse_board(text: str) -> Board:
    """Parse the board text format.

    The first line is "rows cols", followed by rows * cols whitespace-separated
    cells in row-major order. The Qu tile may be written "Qu" or "QU".
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Board text must start with 'rows cols'")
    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise ValueError(f"Invalid board dimensions: {tokens[0]!r} {tokens[1]!r}") from None
    cells = tokens[2:]
    if rows <= 0 or cols <= 0 or len(cells) != rows * cols:
        raise ValueError(f"Expected {rows}x{cols} cells, got {len(cells)}")
    return Board([cells[r * cols : (r + 1) * cols] for r in range(rows)])
