"""Games implementing the engine's Player/GameState contracts.

Modules:
- tictactoe: 3x3 marking game
- reversi: 8x8 disk-flipping game
- chess_game: chess positions backed by python-chess
"""

from .errors import IllegalMoveError
from .tictactoe import TicTacToePlayer, TicTacToeState
from .reversi import ReversiPlayer, ReversiState
from .chess_game import ChessPlayer, ChessState

__all__ = [
    "IllegalMoveError",
    "TicTacToePlayer",
    "TicTacToeState",
    "ReversiPlayer",
    "ReversiState",
    "ChessPlayer",
    "ChessState",
]
