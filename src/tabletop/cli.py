"""
Command-line interface: play a local two-player session in the terminal.
"""

import argparse
import logging
from typing import Any, Callable, Optional

from tabletop.games.dots_and_boxes import DotsAndBoxes
from tabletop.games.game_base import GameBase
from tabletop.games.line_game import LineGame
from tabletop.utils.config import Config, GAMES, LOG_LEVELS
from tabletop.utils.factory import create_game

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}
RESET_COMMANDS = {"r", "reset", "new"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play two-player board games in the terminal"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="connect_four",
        help="Game to play (default: connect_four)",
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=15,
        help="Gomoku board size (default: 15)",
    )
    parser.add_argument(
        "--grid",
        type=int,
        default=4,
        help="Dots and Boxes boxes per side (default: 4)",
    )
    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def move_format(game: GameBase) -> str:
    """Human-readable hint for the move syntax of `game`."""
    if isinstance(game, DotsAndBoxes):
        return "h,row,col or v,row,col (logical grid coordinates)"
    if isinstance(game, LineGame) and game.gravity:
        return "column"
    if isinstance(game, LineGame):
        return "row,col"
    return "cell index (0-8) or row,col"


def parse_move(game: GameBase, raw: str) -> Any:
    """
    Turn user input into a move payload for game.apply_move().

    Raises:
        ValueError: Input does not have the shape the game expects.
    """
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    if not parts:
        raise ValueError("empty move")

    if isinstance(game, DotsAndBoxes):
        if len(parts) != 3:
            raise ValueError(f"expected {move_format(game)}")
        orientation, r, c = parts
        return ((int(r), int(c)), orientation.lower())

    values = [int(p) for p in parts]
    if len(values) == 1:
        return values[0]
    if len(values) == 2:
        return tuple(values)
    raise ValueError(f"expected {move_format(game)}")


def status_line(game: GameBase) -> str:
    if game.is_over():
        if game.winner:
            return f"{game.player_name(game.winner)} wins!"
        return "Draw!"
    return f"{game.player_name(game.current_player())} to move ({move_format(game)})"


def play(
    game: GameBase,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    """Read moves until the user quits or input ends."""
    read = read or input
    write = write or print
    write(game.state_string())
    write(status_line(game))

    while True:
        try:
            raw = read("> ").strip()
        except EOFError:
            return

        command = raw.lower()
        if command in QUIT_COMMANDS:
            return
        if command in RESET_COMMANDS:
            game.reset()
        else:
            try:
                move = parse_move(game, raw)
            except ValueError as e:
                write(f"Invalid input: {e}")
                continue
            if not game.apply_move(move):
                write("Move not allowed.")
                continue

        write(game.state_string())
        write(status_line(game))


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(
            game_name=args.game,
            gomoku_size=args.size,
            dots_grid_size=args.grid,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = create_game(config.game_name, config)
    logger.info("Starting %s", game.game_id())
    play(game)


if __name__ == "__main__":
    main()
