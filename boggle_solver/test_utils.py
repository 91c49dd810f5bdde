import functools
import pathlib

from boggle_solver.solver import BoggleSolver
from boggle_solver.trie import load_dictionary

TESTDATA = pathlib.Path(__file__).resolve().parent.parent / "testdata"
WORDS_FILE = str(TESTDATA / "words.txt")


@functools.cache
def get_words() -> tuple[str, ...]:
    return tuple(load_dictionary(WORDS_FILE))


@functools.cache
def get_solver() -> BoggleSolver:
    return BoggleSolver(get_words())
