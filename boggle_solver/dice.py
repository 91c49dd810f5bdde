"""Generate random Boggle boards.

4x4 boards are rolled with real Boggle dice. Other sizes draw each cell
independently, weighted by English letter frequency.
"""

import random

from boggle_solver.board import Board

A_TO_Z = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# https://www.bananagrammer.com/2013/10/the-boggle-cube-redesign-and-its-effect.html
# "New" Boggle dice, 1987 to ~2008. The Q face is the Qu tile.
DICE = [
    "AAEEGN",
    "ACHOPS",
    "AFFKPS",
    "ABJOOB",
    "CIIMOT",
    "DELRVY",
    "DEILRX",
    "EEINSU",
    "EEGHNW",
    "HLNNRZ",
    "DISTTY",
    "AOOTTW",
    "ELRTTY",
    "EIOSST",
    "EHRTUV",
    "HIMNQU",
]

#                    A        B        C        D        E        F
LETTER_FREQUENCIES = [0.08167, 0.01492, 0.02782, 0.04253, 0.12703, 0.02228,
                      0.02015, 0.06094, 0.06966, 0.00153, 0.00772, 0.04025,
                      0.02406, 0.06749, 0.07507, 0.01929, 0.00095, 0.05987,
                      0.06327, 0.09056, 0.02758, 0.00978, 0.02360, 0.00150,
                      0.01974, 0.00074]  # fmt: skip
assert len(LETTER_FREQUENCIES) == len(A_TO_Z)


def roll_dice() -> str:
    dice = [*DICE]
    random.shuffle(dice)
    return "".join(random.choice(die) for die in dice)


def random_letters(n: int) -> str:
    return "".join(random.choices(A_TO_Z, weights=LETTER_FREQUENCIES, k=n))


def random_board(rows: int, cols: int) -> Board:
    if (rows, cols) == (4, 4):
        letters = roll_dice()
    else:
        letters = random_letters(rows * cols)
    return Board.from_letters(letters, (rows, cols))
