"""
Games module - board game engines.
"""

from tabletop.games.game_state import GameState
from tabletop.games.game_base import GameBase
from tabletop.games.game_rules import in_bounds, board_full, empty_cells, scan_direction, find_line
from tabletop.games.line_game import LineGame
from tabletop.games.tic_tac_toe import TicTacToe
from tabletop.games.connect_four import ConnectFour
from tabletop.games.gomoku import Gomoku
from tabletop.games.dots_and_boxes import DotsAndBoxes, Orientation

__all__ = [
    "GameState",
    "GameBase",
    "LineGame",
    "TicTacToe",
    "ConnectFour",
    "Gomoku",
    "DotsAndBoxes",
    "Orientation",
    "in_bounds",
    "board_full",
    "empty_cells",
    "scan_direction",
    "find_line",
]
