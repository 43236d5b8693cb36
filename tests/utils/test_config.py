"""
Tests for tabletop.utils.config

Tests configuration and game registry.
"""

import logging

import pytest

from tabletop.games.game_base import GameBase
from tabletop.utils.config import DEFAULT_CONFIG, GAMES, Config


class TestGameRegistry:
    """GAMES registry tests."""

    def test_all_games_registered(self):
        assert set(GAMES) == {"tic_tac_toe", "connect_four", "gomoku", "dots_and_boxes"}

    def test_ids_match_keys(self):
        """Registered game classes report their registry key as game_id."""
        for name, game_class in GAMES.items():
            game = game_class()
            assert isinstance(game, GameBase)
            assert game.game_id() == name


class TestConfig:
    """Config class tests."""

    def test_defaults(self):
        config = Config()
        assert config.game_name == "connect_four"
        assert config.gomoku_size == 15
        assert config.dots_grid_size == 4
        assert config.logging_level == logging.WARNING
        assert DEFAULT_CONFIG.game_name == "connect_four"

    def test_log_level_case_insensitive(self):
        assert Config(log_level="debug").logging_level == logging.DEBUG

    @pytest.mark.parametrize("kwargs", [
        {"game_name": "chess"},
        {"gomoku_size": 4},
        {"dots_grid_size": 0},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            Config(**kwargs)

    def test_game_options(self):
        assert Config(game_name="gomoku", gomoku_size=9).game_options() == {"size": 9}
        assert Config(game_name="dots_and_boxes", dots_grid_size=3).game_options() == {"grid_size": 3}
        assert Config(game_name="tic_tac_toe").game_options() == {}
