"""
Factory functions for creating games.
"""

from typing import Optional

from tabletop.games.game_base import GameBase
from tabletop.utils.config import GAMES, Config


def create_game(game_name: str, config: Optional[Config] = None) -> GameBase:
    """
    Create a game instance in its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "connect_four")
        config: Supplies board sizes for games that take them.
                Defaults are used when omitted.

    Returns:
        Fresh game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    if config is None or config.game_name != game_name:
        base = config or Config()
        config = Config(
            game_name=game_name,
            gomoku_size=base.gomoku_size,
            dots_grid_size=base.dots_grid_size,
            log_level=base.log_level,
        )

    game_class = GAMES[game_name]
    return game_class(**config.game_options())
