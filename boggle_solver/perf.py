#!/usr/bin/env python
"""I/O-free performance test.

$ python -m boggle_solver.perf --size 44 10000 --random_seed 808813
"""

import argparse
import random
import time

from tqdm import tqdm

from boggle_solver.args import add_standard_args, get_dims_from_args, get_solver_from_args
from boggle_solver.dice import random_board


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="Boggle solver perf test",
        description="Measure the speed of finding and scoring words, free from I/O.",
    )
    add_standard_args(parser, random_seed=True, size=True)
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to evaluate",
        default=10_000,
        nargs="?",
    )
    args = parser.parse_args(argv)
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    solver = get_solver_from_args(args)
    rows, cols = get_dims_from_args(args)
    n = args.num_boards

    print(f"Generating {n} {rows}x{cols} boards...")
    boards = [random_board(rows, cols) for _ in range(n)]

    total_score = 0
    print("Scoring boards...")
    start_s = time.time()
    for board in tqdm(boards, smoothing=0):
        total_score += solver.score(board)
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(boards) / elapsed_s if elapsed_s > 0 else float("inf")

    print(f"{total_score=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
