#!/usr/bin/env python
"""Find all the words on Boggle boards and score them."""

import argparse
import sys
import time

from boggle_solver.args import add_standard_args, get_solver_from_args
from boggle_solver.board import Board


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find and score the words on boggle boards")
    add_standard_args(parser)
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="+",
        help="Board files: a 'rows cols' line followed by the cells.",
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on each board.",
    )
    args = parser.parse_args(argv)
    solver = get_solver_from_args(args)

    start_s = time.time()
    n = 0
    for path in args.files:
        board = Board.from_file(path)
        words = solver.all_valid_words(board)
        score = sum(solver.score_of(word) for word in words)
        print(f"{path}: {score}")
        if args.print_words:
            print("\n".join(sorted(words)))
        n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s > 0 else float("inf")
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
