from typing import Iterable, Self

LETTER_A = ord("A")
NUM_LETTERS = 26
MIN_WORD_LENGTH = 3


def letter_index(let: str) -> int:
    """Map "A".."Z" to 0..25. Anything else maps to -1."""
    c = ord(let) - LETTER_A
    return c if 0 <= c < NUM_LETTERS else -1


class Trie:
    """A node in a 26-way trie over the uppercase letters A-Z."""

    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * NUM_LETTERS

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return self._is_word

    def set_is_word(self):
        self._is_word = True

    def descend_letters(self, letters: str) -> Self | None:
        """Follow each letter in turn, e.g. both "Q" and "U" for a Qu tile."""
        t = self
        for let in letters:
            c = letter_index(let)
            if c == -1:
                return None
            t = t.descend(c)
            if t is None:
                return None
        return t

    def find_word(self, word: str):
        return self.descend_letters(word)

    def add_word(self, word: str) -> Self:
        t = self
        for let in word:
            c = letter_index(let)
            if not t.starts_word(c):
                t._children[c] = Trie()
            t = t.descend(c)
        t.set_is_word()
        return t

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)


def is_dictionary_word(word: str):
    return word != "" and all(letter_index(let) != -1 for let in word)


class PrefixIndex:
    """Set of uppercase words supporting exact and prefix lookups.

    Built once from a word list and never mutated by the search, so a single
    index can back any number of searches.
    """

    def __init__(self):
        self._root = Trie()

    def root(self) -> Trie:
        return self._root

    def insert(self, word: str):
        """Add word to the index. Inserting a word twice is a no-op.

        Raises ValueError for anything but a non-empty run of A-Z, without
        touching the trie.
        """
        if not is_dictionary_word(word):
            raise ValueError(f"Invalid dictionary word: {word!r}")
        self._root.add_word(word)

    def has_prefix(self, prefix: str) -> bool:
        """Is prefix a stored word or the start of one?"""
        return self._root.descend_letters(prefix) is not None

    def is_word(self, word: str) -> bool:
        t = self._root.find_word(word)
        return t is not None and t.is_word()

    def exact_matches(self, pattern: str) -> set[str]:
        """{pattern} if it's a stored word of scoring length, else empty."""
        if len(pattern) >= MIN_WORD_LENGTH and self.is_word(pattern):
            return {pattern}
        return set()

    def __contains__(self, word: str):
        return self.is_word(word)

    def size(self):
        return self._root.size()

    def num_nodes(self):
        return self._root.num_nodes()

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "PrefixIndex":
        index = PrefixIndex()
        for word in words:
            index.insert(word)
        return index

    @staticmethod
    def create_from_file(path: str) -> "PrefixIndex":
        return PrefixIndex.create_from_wordlist(load_dictionary(path))


def load_dictionary(path: str) -> list[str]:
    """Read whitespace-separated words, keeping order and duplicates."""
    with open(path) as f:
        return f.read().split()
