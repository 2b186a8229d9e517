"""Plain-text board rendering for the terminal."""

from .core.hitori import HitoriState, validate
from .core.memory import MemoryState
from .core.minesweeper import MinesweeperState
from .core.nonogram import CellState, NonogramState
from .core.sudoku import SudokuState
from .core.tiles import TilesState

_NONOGRAM_SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.FILLED: "#",
    CellState.MARKED: "x",
}


def _header(cols: int, width: int = 2) -> str:
    return "   " + "".join(f"{c + 1:>{width}}" for c in range(cols))


def render_sudoku(state: SudokuState) -> str:
    """9x9 board with box rules. Wrong entries are suffixed with '!'."""
    lines = ["    1 2 3   4 5 6   7 8 9"]
    for r, row in enumerate(state.board):
        if r and r % 3 == 0:
            lines.append("   -------+-------+-------")
        parts = []
        for c, cell in enumerate(row):
            if c and c % 3 == 0:
                parts.append("|")
            text = str(cell.value) if cell.value else "."
            parts.append(text + ("!" if cell.is_error else ""))
        lines.append(f"{r + 1:>2}  " + " ".join(parts))
    lines.append(f"Mistakes: {state.mistakes}")
    return "\n".join(lines)


def _mine_symbol(cell) -> str:
    if cell.is_revealed:
        if cell.is_mine:
            return "*"
        return str(cell.adjacent_mines) if cell.adjacent_mines else "."
    return "F" if cell.is_flagged else "#"


def render_minesweeper(state: MinesweeperState, elapsed: int = 0) -> str:
    lines = [_header(state.config.cols, 3)]
    for r, row in enumerate(state.grid):
        lines.append(f"{r + 1:>3}" + "".join(f"{_mine_symbol(cell):>3}" for cell in row))
    lines.append(f"Mines left: {state.remaining_mines}   Time: {elapsed}s")
    return "\n".join(lines)


def render_tiles(state: TilesState) -> str:
    width = max(4, max(len(str(v)) for row in state.grid for v in row))
    rule = "+" + "+".join("-" * (width + 2) for _ in state.grid[0]) + "+"
    lines = [f"Score: {state.score}   Best: {state.best_score}", rule]
    for row in state.grid:
        lines.append("|" + "|".join(f" {v if v else '':>{width}} " for v in row) + "|")
        lines.append(rule)
    return "\n".join(lines)


def render_memory(state: MemoryState, columns: int = 4) -> str:
    """Cards laid out in rows, numbered from 1. Face-down cards show '?'."""
    width = max(len(card.icon) for card in state.cards)
    lines = []
    for start in range(0, len(state.cards), columns):
        parts = []
        for i in range(start, min(start + columns, len(state.cards))):
            card = state.cards[i]
            face = card.icon if card.flipped or card.matched else "?"
            parts.append(f"{i + 1:>2}:{face:<{width}}")
        lines.append("  ".join(parts))
    lines.append(f"Moves: {state.moves}   Pairs: {state.matches}/{state.pair_count}")
    return "\n".join(lines)


def render_nonogram(state: NonogramState) -> str:
    """Grid with row clues on the right and column clues underneath."""
    puzzle = state.puzzle
    lines = [_header(puzzle.cols)]
    for r, row in enumerate(state.grid):
        cells = "".join(f"{_NONOGRAM_SYMBOLS[cell]:>2}" for cell in row)
        clue = " ".join(str(n) for n in puzzle.row_clues[r])
        lines.append(f"{r + 1:>3}{cells}   {clue}")

    depth = max(len(clues) for clues in puzzle.col_clues)
    for i in range(depth):
        parts = []
        for clues in puzzle.col_clues:
            offset = depth - len(clues)
            parts.append(f"{clues[i - offset] if i >= offset else '':>2}")
        lines.append("   " + "".join(parts))
    lines.append(f"Mistakes: {state.mistakes}")
    return "\n".join(lines)


def render_hitori(state: HitoriState) -> str:
    """Numbers with shaded cells as '#'. Cells breaking a rule are suffixed with '!'."""
    result = validate(state.grid)
    errors = result.error_cells()
    lines = [_header(len(state.grid[0]), 3)]
    for r, row in enumerate(state.grid):
        parts = []
        for c, cell in enumerate(row):
            text = "#" if cell.is_shaded else str(cell.value)
            if (r, c) in errors:
                text += "!"
            parts.append(f"{text:>3}")
        lines.append(f"{r + 1:>3}" + "".join(parts))
    if not result.connected:
        lines.append("Unshaded cells are not connected")
    return "\n".join(lines)
