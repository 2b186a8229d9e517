"""Pastime CLI - puzzle games in the terminal."""

import logging
import sys
import time
from dataclasses import replace

import click

from . import render
from .config import load_config
from .core import hitori, memory, minesweeper, nonogram, sudoku
from .core.difficulty import Difficulty
from .core.tiles import Direction
from .preferences import SOUNDS, THEMES, load_preferences, save_preferences
from .sessions import (
    MinesweeperSession,
    SudokuSession,
    TilesSession,
    get_puzzle_source,
    get_store,
    load_best_score,
    validate_banks,
)

QUIT = ("q", "quit", "exit")


def _difficulty(name: str, supported) -> Difficulty:
    """Parse a difficulty name for a game, exiting with an error if unsupported."""
    try:
        difficulty = Difficulty.parse(name)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if difficulty not in supported:
        names = ", ".join(d.value for d in supported)
        click.echo(f"Error: {difficulty.value!r} is not available (choose from: {names})", err=True)
        sys.exit(1)
    return difficulty


def parse_numbers(text: str, count: int) -> list[int] | None:
    """Split text into exactly count integers, or None."""
    parts = text.replace(",", " ").split()
    if len(parts) != count:
        return None
    try:
        return [int(p) for p in parts]
    except ValueError:
        return None


def parse_cell(text: str) -> tuple[int, int] | None:
    """'row col' (1-based) to a 0-based coordinate."""
    numbers = parse_numbers(text, 2)
    if numbers is None:
        return None
    return numbers[0] - 1, numbers[1] - 1


def _read() -> str:
    return click.prompt(">", default="", show_default=False).strip().lower()


@click.group()
@click.version_option(package_name="pastime")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Pastime - Puzzle games in the terminal."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command("sudoku")
@click.option("--difficulty", "-d", default=None, help="easy, medium or hard")
@click.option("--offline", is_flag=True, help="Use the local puzzle bank only")
def sudoku_cmd(difficulty: str | None, offline: bool):
    """Play Sudoku."""
    config = load_config()
    level = _difficulty(difficulty or config.sudoku_difficulty, sudoku.DIFFICULTIES)
    source = None if offline else get_puzzle_source(config)

    session = SudokuSession(level, source)
    if session.status == sudoku.SudokuStatus.LOADING:
        click.echo("Loading puzzle...")
    try:
        state = session.load()
    except ValueError as e:
        click.echo(f"Error: Failed to load puzzle, try again ({e})", err=True)
        sys.exit(1)

    usage = "Enter 'row col digit' (digit 0 clears), 'h' for a hint, 'q' to quit."
    click.echo(usage)
    while True:
        click.echo(render.render_sudoku(state))
        if state.is_complete:
            click.echo(f"Solved with {state.mistakes} mistake(s)!")
            return

        command = _read()
        if command in QUIT:
            return
        if command == "h":
            state, hint = sudoku.apply_hint(state)
            if hint:
                click.echo(f"Hint: {hint.value} at row {hint.row + 1}, column {hint.col + 1}")
            continue

        numbers = parse_numbers(command, 3)
        if numbers is None:
            click.echo(usage)
            continue
        row, col, value = numbers
        state = sudoku.apply_move(state, row - 1, col - 1, value)


@main.command("minesweeper")
@click.option("--difficulty", "-d", default=None, help="beginner, intermediate or expert")
def minesweeper_cmd(difficulty: str | None):
    """Play Minesweeper."""
    config = load_config()
    level = _difficulty(difficulty or config.minesweeper_difficulty, tuple(minesweeper.DIFFICULTIES))
    session = MinesweeperSession(minesweeper.config_for(level))

    usage = "Enter 'row col' to reveal, 'f row col' to flag, 'q' to quit."
    click.echo(usage)
    while True:
        click.echo(render.render_minesweeper(session.state, session.timer.elapsed))
        if session.state.status == minesweeper.MinesweeperStatus.WON:
            click.echo(f"You win! Time: {session.timer.elapsed}s")
            return
        if session.state.status == minesweeper.MinesweeperStatus.LOST:
            click.echo("Boom! Game over.")
            return

        command = _read()
        if command in QUIT:
            return

        flag = command.startswith("f")
        cell = parse_cell(command[1:] if flag else command)
        if cell is None:
            click.echo(usage)
            continue
        if flag:
            session.toggle_flag(*cell)
        else:
            session.reveal(*cell)


@main.command("2048")
def tiles_cmd():
    """Play 2048."""
    config = load_config()
    session = TilesSession(get_store(config))

    usage = "Move with w/a/s/d (or up/down/left/right), 'q' to quit."
    click.echo(usage)
    while True:
        click.echo(render.render_tiles(session.state))
        if session.state.game_over:
            click.echo(f"Game over! Final score: {session.state.score}")
            return

        command = _read()
        if command in QUIT:
            return
        try:
            direction = Direction.parse(command)
        except ValueError:
            click.echo(usage)
            continue

        session.move(direction)
        if session.just_won:
            click.echo("You reached 2048! Keep going for a higher score.")


@main.command("memory")
@click.option("--pairs", "-p", type=int, default=None, help="Number of pairs (1-12)")
def memory_cmd(pairs: int | None):
    """Play Memory Match."""
    config = load_config()
    try:
        state = memory.new_game(pairs if pairs is not None else config.memory_pairs)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    usage = f"Enter a card number (1-{len(state.cards)}), 'q' to quit."
    click.echo(usage)
    while True:
        click.echo(render.render_memory(state))
        if state.is_won:
            click.echo(f"All pairs found in {state.moves} moves!")
            return

        command = _read()
        if command in QUIT:
            return
        numbers = parse_numbers(command, 1)
        if numbers is None:
            click.echo(usage)
            continue

        state = memory.handle_card_press(state, numbers[0] - 1)
        delay = memory.pending_delay(state)
        if delay is not None:
            click.echo(render.render_memory(state))
            click.echo("Match!" if state.pending_match else "No match.")
            time.sleep(delay)
            state = memory.resolve_comparison(state)


@main.command("nonogram")
@click.option("--difficulty", "-d", default=None, help="easy or medium")
def nonogram_cmd(difficulty: str | None):
    """Play Nonogram."""
    config = load_config()
    level = _difficulty(difficulty or config.nonogram_difficulty, nonogram.DIFFICULTIES)
    state = nonogram.new_game(nonogram.random_puzzle(level))

    usage = "Enter 'row col' to cycle a cell, 'm row col' to mark blank, 'h' for a hint, 'q' to quit."
    click.echo(usage)
    while True:
        click.echo(render.render_nonogram(state))
        if state.is_complete:
            click.echo(f"Solved with {state.mistakes} mistake(s)!")
            return

        command = _read()
        if command in QUIT:
            return
        if command == "h":
            state, _ = nonogram.apply_hint(state)
            continue

        mark = command.startswith("m")
        cell = parse_cell(command[1:] if mark else command)
        if cell is None:
            click.echo(usage)
            continue
        if mark:
            state = nonogram.handle_cell_long_press(state, *cell)
        else:
            state = nonogram.handle_cell_press(state, *cell)


@main.command("hitori")
@click.option("--difficulty", "-d", default=None, help="easy or medium")
def hitori_cmd(difficulty: str | None):
    """Play Hitori."""
    config = load_config()
    level = _difficulty(difficulty or config.hitori_difficulty, hitori.DIFFICULTIES)
    state = hitori.new_game(hitori.random_puzzle(level))

    usage = "Enter 'row col' to shade or unshade, 'h' for a hint, 'q' to quit."
    click.echo(usage)
    while True:
        click.echo(render.render_hitori(state))
        if state.is_complete:
            click.echo("Solved!")
            return

        command = _read()
        if command in QUIT:
            return
        if command == "h":
            state, _ = hitori.apply_hint(state)
            continue

        cell = parse_cell(command)
        if cell is None:
            click.echo(usage)
            continue
        state = hitori.toggle_cell(state, *cell)


@main.command()
def best():
    """Show the 2048 best score."""
    config = load_config()
    click.echo(f"Best score: {load_best_score(get_store(config))}")


@main.command()
def banks():
    """Check every built-in puzzle."""
    problems = validate_banks()
    if problems:
        for problem in problems:
            click.echo(f"✗ {problem}", err=True)
        sys.exit(1)
    click.echo("✓ All puzzle banks are valid.")


@main.command()
@click.option("--theme", type=click.Choice(THEMES), default=None, help="Color theme")
@click.option("--sound", type=click.Choice(SOUNDS), default=None, help="Notification sound")
@click.option("--notifications/--no-notifications", default=None, help="Enable notifications")
def settings(theme: str | None, sound: str | None, notifications: bool | None):
    """Show or change preferences."""
    config = load_config()
    store = get_store(config)
    prefs = load_preferences(store)

    changes = {}
    if theme is not None:
        changes["theme"] = theme
    if sound is not None:
        changes["notification_sound"] = sound
    if notifications is not None:
        changes["notifications_enabled"] = notifications

    if changes:
        prefs = replace(prefs, **changes)
        try:
            save_preferences(store, prefs)
        except (ValueError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    click.echo(f"Theme: {prefs.theme}")
    click.echo(f"Notification sound: {prefs.notification_sound}")
    click.echo(f"Notifications: {'on' if prefs.notifications_enabled else 'off'}")


if __name__ == "__main__":
    main()
