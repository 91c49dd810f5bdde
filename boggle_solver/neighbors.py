import functools


@functools.cache
def init_neighbors(rows: int, cols: int) -> list[list[int]]:
    """Adjacent cells (including diagonals) for each cell of a rows x cols board.

    Cells are numbered in row-major order: idx = row * cols + col.
    """

    def idx(r: int, c: int):
        return cols * r + c

    def pos(idx: int):
        return (idx // cols, idx % cols)

    ns: list[list[int]] = []
    for i in range(0, rows * cols):
        r, c = pos(i)
        n = []
        for dr in range(-1, 2):
            nr = r + dr
            if nr < 0 or nr >= rows:
                continue
            for dc in range(-1, 2):
                nc = c + dc
                if nc < 0 or nc >= cols:
                    continue
                if dr == 0 and dc == 0:
                    continue
                n.append(idx(nr, nc))
        n.sort()
        ns.append(n)
    return ns
