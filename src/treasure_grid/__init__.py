"""
Treasure Grid Game - a small console game on a fixed 5x5 board.

The player walks the board with W/A/S/D, is blocked by obstacles and wins by
collecting all three treasures. Q quits.
"""

from .board import Board, is_valid_move, ROWS, COLS, TREASURES_TO_WIN
from .game import TreasureGame, Direction, GameState
from .visualize import visualize_board

__all__ = [
    'Board', 'is_valid_move', 'ROWS', 'COLS', 'TREASURES_TO_WIN',
    'TreasureGame', 'Direction', 'GameState', 'visualize_board',
]
__version__ = '1.0.0'
