"""Roll the letter cubes to make a random Boggle board."""

import random

from boggle.board import Board, normalize_token

# Boggle dice, 1987 to ~2008. The Q face is really "Qu".
DICE = [
    "AAEEGN",
    "ABBJOO",
    "ACHOPS",
    "AFFKPS",
    "AOOTTW",
    "CIMOTU",
    "DEILRX",
    "DELRVY",
    "DISTTY",
    "EEGHNW",
    "EEINSU",
    "EHRTVW",
    "EIOSST",
    "ELRTTY",
    "HIMNQU",
    "HLNNRZ",
]

BIG_BOGGLE_DICE = [
    "AAAFRS",
    "AAEEEE",
    "AAFIRS",
    "ADENNN",
    "AEEEEM",
    "AEEGMU",
    "AEGMNN",
    "AFIRSY",
    "BJKQXZ",
    "CCNSTW",
    "CEIILT",
    "CEILPT",
    "CEIPST",
    "DDLNOR",
    "DDHNOT",
    "DHHLOR",
    "DHLNOR",
    "EIIITT",
    "EMOTTT",
    "ENSSSU",
    "FIPRSY",
    "GORRVW",
    "HIPRRY",
    "NOOTUW",
    "OOOTTU",
]

DIMS_TO_DICE = {
    (4, 4): DICE,
    (5, 5): BIG_BOGGLE_DICE,
}


def roll_board(dims: tuple[int, int], rng: random.Random | None = None) -> Board:
    """Shake the dice: each cube lands in a random cell with a random face up."""
    if dims not in DIMS_TO_DICE:
        raise ValueError(f"No dice for a {dims[0]}x{dims[1]} board")
    rng = rng or random.Random()
    dice = [*DIMS_TO_DICE[dims]]
    rng.shuffle(dice)
    faces = [normalize_token(rng.choice(die)) for die in dice]
    h, w = dims
    return Board([faces[i * w : (i + 1) * w] for i in range(h)])
