"""
Static puzzle banks.

Every entry is checked by tests/test_banks.py and by `pastime banks`:
Sudoku puzzles must solve, Nonogram clues must match their solution grid, and
Hitori solutions must satisfy all three shading rules.
"""

from .difficulty import Difficulty

# 0 = blank
SUDOKU_PUZZLES: dict[Difficulty, tuple] = {
    Difficulty.EASY: (
        (
            (5, 3, 0, 0, 7, 0, 0, 0, 0),
            (6, 0, 0, 1, 9, 5, 0, 0, 0),
            (0, 9, 8, 0, 0, 0, 0, 6, 0),
            (8, 0, 0, 0, 6, 0, 0, 0, 3),
            (4, 0, 0, 8, 0, 3, 0, 0, 1),
            (7, 0, 0, 0, 2, 0, 0, 0, 6),
            (0, 6, 0, 0, 0, 0, 2, 8, 0),
            (0, 0, 0, 4, 1, 9, 0, 0, 5),
            (0, 0, 0, 0, 8, 0, 0, 7, 9),
        ),
        (
            (0, 0, 0, 2, 6, 0, 7, 0, 1),
            (6, 8, 0, 0, 7, 0, 0, 9, 0),
            (1, 9, 0, 0, 0, 4, 5, 0, 0),
            (8, 2, 0, 1, 0, 0, 0, 4, 0),
            (0, 0, 4, 6, 0, 2, 9, 0, 0),
            (0, 5, 0, 0, 0, 3, 0, 2, 8),
            (0, 0, 9, 3, 0, 0, 0, 7, 4),
            (0, 4, 0, 0, 5, 0, 0, 3, 6),
            (7, 0, 3, 0, 1, 8, 0, 0, 0),
        ),
    ),
    Difficulty.MEDIUM: (
        (
            (0, 0, 3, 0, 2, 0, 6, 0, 0),
            (9, 0, 0, 3, 0, 5, 0, 0, 1),
            (0, 0, 1, 8, 0, 6, 4, 0, 0),
            (0, 0, 8, 1, 0, 2, 9, 0, 0),
            (7, 0, 0, 0, 0, 0, 0, 0, 8),
            (0, 0, 6, 7, 0, 8, 2, 0, 0),
            (0, 0, 2, 6, 0, 9, 5, 0, 0),
            (8, 0, 0, 2, 0, 3, 0, 0, 9),
            (0, 0, 5, 0, 1, 0, 3, 0, 0),
        ),
        (
            (2, 0, 0, 0, 8, 0, 3, 0, 0),
            (0, 6, 0, 0, 7, 0, 0, 8, 4),
            (0, 3, 0, 5, 0, 0, 2, 0, 9),
            (0, 0, 0, 1, 0, 5, 4, 0, 8),
            (0, 0, 0, 0, 0, 0, 0, 0, 0),
            (4, 0, 2, 7, 0, 6, 0, 0, 0),
            (3, 0, 1, 0, 0, 7, 0, 4, 0),
            (7, 2, 0, 0, 4, 0, 0, 6, 0),
            (0, 0, 4, 0, 1, 0, 0, 0, 3),
        ),
    ),
    Difficulty.HARD: (
        (
            (0, 0, 5, 3, 0, 0, 0, 0, 0),
            (8, 0, 0, 0, 0, 0, 0, 2, 0),
            (0, 7, 0, 0, 1, 0, 5, 0, 0),
            (4, 0, 0, 0, 0, 5, 3, 0, 0),
            (0, 1, 0, 0, 7, 0, 0, 0, 6),
            (0, 0, 3, 2, 0, 0, 0, 8, 0),
            (0, 6, 0, 5, 0, 0, 0, 0, 9),
            (0, 0, 4, 0, 0, 0, 0, 3, 0),
            (0, 0, 0, 0, 0, 9, 7, 0, 0),
        ),
        (
            (8, 0, 0, 0, 0, 0, 0, 0, 0),
            (0, 0, 3, 6, 0, 0, 0, 0, 0),
            (0, 7, 0, 0, 9, 0, 2, 0, 0),
            (0, 5, 0, 0, 0, 7, 0, 0, 0),
            (0, 0, 0, 0, 4, 5, 7, 0, 0),
            (0, 0, 0, 1, 0, 0, 0, 3, 0),
            (0, 0, 1, 0, 0, 0, 0, 6, 8),
            (0, 0, 8, 5, 0, 0, 0, 1, 0),
            (0, 9, 0, 0, 0, 0, 4, 0, 0),
        ),
    ),
}

# Each entry: (row_clues, col_clues, solution)
NONOGRAM_PUZZLES: dict[Difficulty, tuple] = {
    Difficulty.EASY: (
        (
            ((2,), (1, 1), (5,), (1,), (3,)),
            ((2,), (1, 1, 1), (5,), (1, 1), (1,)),
            (
                (0, 1, 1, 0, 0),
                (1, 0, 1, 0, 0),
                (1, 1, 1, 1, 1),
                (0, 0, 1, 0, 0),
                (0, 1, 1, 1, 0),
            ),
        ),
        (
            ((3,), (1, 1, 1), (1, 1, 1), (1, 1, 1), (3,)),
            ((3,), (1, 1), (5,), (1, 1), (3,)),
            (
                (0, 1, 1, 1, 0),
                (1, 0, 1, 0, 1),
                (1, 0, 1, 0, 1),
                (1, 0, 1, 0, 1),
                (0, 1, 1, 1, 0),
            ),
        ),
    ),
    Difficulty.MEDIUM: (
        (
            ((3,), (5,), (7,), (8,), (7,), (5,), (3,), (1,)),
            ((3,), (5,), (7,), (8,), (7,), (5,), (3,), (1,)),
            (
                (0, 0, 1, 1, 1, 0, 0, 0),
                (0, 1, 1, 1, 1, 1, 0, 0),
                (1, 1, 1, 1, 1, 1, 1, 0),
                (1, 1, 1, 1, 1, 1, 1, 1),
                (1, 1, 1, 1, 1, 1, 1, 0),
                (0, 1, 1, 1, 1, 1, 0, 0),
                (0, 0, 1, 1, 1, 0, 0, 0),
                (0, 0, 0, 1, 0, 0, 0, 0),
            ),
        ),
    ),
}

_ = False
X = True

# Each entry: (initial numbers, shading solution)
HITORI_PUZZLES: dict[Difficulty, tuple] = {
    Difficulty.EASY: (
        (
            (
                (1, 3, 3, 4, 5),
                (2, 3, 4, 2, 1),
                (5, 4, 5, 1, 2),
                (4, 5, 4, 2, 5),
                (5, 2, 2, 3, 4),
            ),
            (
                (_, X, _, _, _),
                (_, _, _, X, _),
                (X, _, _, _, _),
                (_, _, X, _, X),
                (_, X, _, _, _),
            ),
        ),
        (
            (
                (3, 2, 3, 4, 2),
                (3, 4, 4, 1, 2),
                (5, 5, 2, 3, 4),
                (2, 3, 4, 1, 1),
                (5, 5, 3, 2, 3),
            ),
            (
                (X, _, _, _, X),
                (_, _, X, _, _),
                (_, X, _, _, _),
                (_, _, _, X, _),
                (X, _, X, _, _),
            ),
        ),
    ),
    Difficulty.MEDIUM: (
        (
            (
                (1, 4, 3, 4, 5, 1, 7),
                (3, 4, 5, 7, 7, 1, 2),
                (5, 6, 6, 1, 2, 3, 5),
                (7, 3, 2, 3, 7, 5, 6),
                (2, 3, 4, 2, 6, 7, 1),
                (7, 5, 1, 7, 1, 5, 3),
                (6, 7, 1, 2, 6, 4, 5),
            ),
            (
                (_, X, _, _, _, X, _),
                (_, _, _, X, _, _, _),
                (_, _, X, _, _, _, X),
                (_, X, _, _, X, _, _),
                (_, _, _, X, _, _, _),
                (X, _, X, _, _, X, _),
                (_, _, _, _, X, _, _),
            ),
        ),
    ),
}

del _, X
