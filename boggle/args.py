"""Standard command-line arguments shared across tools."""

import argparse
import random
import sys

from boggle.board import SIZE_TO_DIMS
from boggle.trie import PyTrie


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--size",
        type=int,
        choices=tuple(SIZE_TO_DIMS),
        default=44,
        help="Size of the boggle board: 44 for standard Boggle, 55 for Big Boggle.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable2k.txt",
        help="Path to dictionary file with one word per line.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_dims_from_args(args: argparse.Namespace) -> tuple[int, int]:
    return SIZE_TO_DIMS[args.size]


def get_rng_from_args(args: argparse.Namespace) -> random.Random:
    if args.random_seed >= 0:
        return random.Random(args.random_seed)
    return random.Random()


def get_trie_from_args(args: argparse.Namespace) -> PyTrie:
    t = PyTrie.create_from_file(args.dictionary)
    sys.stderr.write(f"Loaded {t.size()} words ({t.num_nodes()} trie nodes)\n")
    return t
