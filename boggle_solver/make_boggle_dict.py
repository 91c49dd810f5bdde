#!/usr/bin/env python
"""Filter a word list to just words the solver can score, in uppercase."""

import fileinput

from boggle_solver.trie import MIN_WORD_LENGTH, is_dictionary_word


def normalize_word(word: str) -> str | None:
    word = word.strip().upper()
    if len(word) < MIN_WORD_LENGTH or not is_dictionary_word(word):
        return None
    return word


def main():
    for line in fileinput.input():
        word = normalize_word(line)
        if word:
            print(word)


if __name__ == "__main__":
    main()
