"""Generic minimax decision engine for turn-based games.

Modules:
- interfaces: Player and GameState contracts a game implements
- evaluation: Scored results, node polarity and tie-breaking
- alphabeta: Alpha/beta bounds used for pruning
- analytics: Node counters collected during a search
- node: Recursive game tree traversal
- engine: Engine entry point and error types
- config: Settings and logging setup
- games: Tic-tac-toe, reversi and chess collaborators
"""

from .analytics import Analytics
from .engine import (
    AnalyticsUnavailableError,
    Engine,
    EngineConfigurationError,
    InvalidDepthError,
    MinimaxError,
    NoPossibleMovesError,
    NotPlayersTurnError,
    SearchInconsistencyError,
)
from .evaluation import Evaluation, NodeType
from .interfaces import GameState, Player

__all__ = [
    "Analytics",
    "AnalyticsUnavailableError",
    "Engine",
    "EngineConfigurationError",
    "Evaluation",
    "GameState",
    "InvalidDepthError",
    "MinimaxError",
    "NoPossibleMovesError",
    "NodeType",
    "NotPlayersTurnError",
    "Player",
    "SearchInconsistencyError",
]
