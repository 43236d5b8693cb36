"""
Configuration and game registry.
"""

import logging

from tabletop.games import TicTacToe, ConnectFour, Gomoku, DotsAndBoxes
from tabletop.games.dots_and_boxes import DEFAULT_GRID_SIZE
from tabletop.games.gomoku import DEFAULT_SIZE, FIVE


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
    "connect_four": ConnectFour,
    "gomoku": Gomoku,
    "dots_and_boxes": DotsAndBoxes,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "connect_four",
        gomoku_size: int = DEFAULT_SIZE,
        dots_grid_size: int = DEFAULT_GRID_SIZE,
        log_level: str = "WARNING",
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")
        if gomoku_size < FIVE:
            raise ValueError(f"gomoku_size must be at least {FIVE}, got {gomoku_size}")
        if dots_grid_size < 1:
            raise ValueError(f"dots_grid_size must be at least 1, got {dots_grid_size}")
        if log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level}. Available: {', '.join(LOG_LEVELS)}")

        self.game_name = game_name
        self.gomoku_size = gomoku_size
        self.dots_grid_size = dots_grid_size
        self.log_level = log_level.upper()

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def game_options(self) -> dict:
        """Constructor keyword arguments for the selected game."""
        if self.game_name == "gomoku":
            return {"size": self.gomoku_size}
        if self.game_name == "dots_and_boxes":
            return {"grid_size": self.dots_grid_size}
        return {}


# Default configuration
DEFAULT_CONFIG = Config()
