"""Standard command-line arguments shared across tools."""

import argparse

from boggle_solver.solver import BoggleSolver
from boggle_solver.trie import load_dictionary


def add_standard_args(
    parser: argparse.ArgumentParser, *, random_seed=False, size=False
):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/dictionary-yawl.txt",
        help="Path to dictionary file of uppercase words, one per line.",
    )

    if size:
        parser.add_argument(
            "--size",
            type=int,
            choices=(22, 23, 33, 34, 44, 45, 55),
            default=44,
            help="Size of the boggle board, as rows and columns (e.g. 34 for 3x4).",
        )
    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_dims_from_args(args: argparse.Namespace) -> tuple[int, int]:
    return args.size // 10, args.size % 10


def get_solver_from_args(args: argparse.Namespace) -> BoggleSolver:
    return BoggleSolver(load_dictionary(args.dictionary))
