from typing import Iterable

from boggle_solver.board import Board
from boggle_solver.neighbors import init_neighbors
from boggle_solver.trie import MIN_WORD_LENGTH, PrefixIndex, Trie

#                  1, 2, 3, 4, 5, 6, 7,  8+
SCORES = tuple([0, 0, 0, 1, 1, 2, 3, 5, 11])


def cell_letters(let: str) -> str:
    """The letters a board cell contributes to a word."""
    return "QU" if let == "Q" else let


class BoggleSolver:
    """Finds and scores all the dictionary words on a board.

    The solver only holds the dictionary. Each call to all_valid_words has its
    own search state, so one solver can be used for any number of boards.
    """

    _index: PrefixIndex

    def __init__(self, dictionary: Iterable[str]):
        self._index = PrefixIndex.create_from_wordlist(dictionary)

    def index(self) -> PrefixIndex:
        return self._index

    def all_valid_words(self, board: Board) -> set[str]:
        rows, cols = board.rows(), board.cols()
        n = rows * cols
        neighbors = init_neighbors(rows, cols)
        cells = [cell_letters(board.letter(r, c)) for r in range(rows) for c in range(cols)]
        used = [False] * n
        found: set[str] = set()

        def dfs(i: int, prefix: str, t: Trie):
            used[i] = True
            if t.is_word() and len(prefix) >= MIN_WORD_LENGTH:
                found.add(prefix)

            for idx in neighbors[i]:
                if not used[idx]:
                    d = t.descend_letters(cells[idx])
                    if d:
                        dfs(idx, prefix + cells[idx], d)

            used[i] = False

        root = self._index.root()
        for i in range(0, n):
            d = root.descend_letters(cells[i])
            if d:
                dfs(i, cells[i], d)

        assert not any(used)
        return found

    def score_of(self, word: str) -> int:
        """Points for word if it's in the dictionary, whether or not it's on a board."""
        if word is None:
            raise ValueError("word must not be None")
        if len(word) < MIN_WORD_LENGTH or not self._index.is_word(word):
            return 0
        return SCORES[min(len(word), len(SCORES) - 1)]

    def score(self, board: Board) -> int:
        return sum(self.score_of(word) for word in self.all_valid_words(board))
