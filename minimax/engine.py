from __future__ import annotations

import logging
from typing import Optional

from .alphabeta import AlphaBeta
from .analytics import Analytics
from .config import EngineSettings, get_engine_settings
from .evaluation import Evaluation, NodeType
from .interfaces import GameState, Player
from .node import DecisionNode

logger = logging.getLogger(__name__)


class Engine:
    """Minimax with alpha-beta pruning, playing on behalf of one player.

    Construct it with the player to optimize for and call ``decide`` whenever
    that player has its turn. The result is the successor state the engine
    chose; applying it is simply a matter of continuing from that state.
    """

    def __init__(
        self,
        objective_player: Player,
        max_depth: Optional[int] = None,
        *,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        settings = settings or get_engine_settings()
        self.objective_player = objective_player
        self.max_depth = settings.default_depth if max_depth is None else max_depth
        self.pruning = settings.alpha_beta_pruning
        # Only available after a completed decide()
        self._analytics: Optional[Analytics] = None
        self.last_evaluation: Optional[Evaluation] = None

    def decide(self, state: GameState) -> GameState:
        """Search the game tree and return the state after the ideal move.

        The objective player must have its turn in ``state``.
        """
        if not state.get_next_player().equals(self.objective_player):
            logger.warning("decide() called out of turn for %s", self.objective_player)
            raise NotPlayersTurnError("It is not this player's turn")
        if self.max_depth < 1:
            raise InvalidDepthError(f"max_depth must be at least 1, got {self.max_depth}")
        if not state.get_possible_moves():
            raise NoPossibleMovesError("There are no possible moves")

        root = DecisionNode(
            self.objective_player,
            state,
            self.max_depth,
            NodeType.MAX,
            AlphaBeta.initial(),
            pruning=self.pruning,
        )
        result = root.traverse()
        self._analytics = result.analytics
        self.last_evaluation = result.evaluation
        logger.debug(
            "depth=%d pruning=%s nodes=%d leaves=%d score=%s age=%d",
            self.max_depth,
            self.pruning,
            result.analytics.nodes_evaluated,
            result.analytics.leaf_nodes_evaluated,
            result.evaluation.score,
            result.evaluation.age,
        )
        if result.move is None:
            raise SearchInconsistencyError(
                "Could not find a move even though there are moves. Is max_depth correct?"
            )
        return result.move

    def get_analytics(self) -> Analytics:
        if self._analytics is None:
            raise AnalyticsUnavailableError("Please run decide() first.")
        return self._analytics


class MinimaxError(Exception):
    """Base class for engine errors."""


class NotPlayersTurnError(MinimaxError, ValueError):
    pass


class NoPossibleMovesError(MinimaxError):
    """The state is terminal for the objective player."""


class EngineConfigurationError(MinimaxError, RuntimeError):
    pass


class InvalidDepthError(EngineConfigurationError):
    pass


class SearchInconsistencyError(EngineConfigurationError):
    pass


class AnalyticsUnavailableError(MinimaxError, RuntimeError):
    pass
