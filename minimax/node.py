from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .alphabeta import AlphaBeta
from .analytics import Analytics
from .evaluation import Evaluation, NodeType
from .interfaces import GameState, Player


@dataclass
class TraversalResult:
    """Outcome of traversing one node.

    ``move`` is the successor state that leads to ``evaluation``. It is None
    for leaf nodes, where no move was made.
    """

    move: Optional[GameState]
    evaluation: Evaluation
    analytics: Analytics


class DecisionNode:
    """Node in the game search tree.

    A MAX node picks the outcome that is best for the objective player, a MIN
    node the one that is worst for it, reflecting that opponents play
    optimally too. Children are typed by whether the player to move there is
    friendly with the objective player.
    """

    def __init__(
        self,
        objective_player: Player,
        state: GameState,
        depth_left: int,
        node_type: NodeType,
        alpha_beta: AlphaBeta,
        pruning: bool = True,
    ) -> None:
        self.objective_player = objective_player
        self.state = state
        self.depth_left = depth_left
        self.node_type = node_type
        self.alpha_beta = alpha_beta
        self.pruning = pruning

    def traverse(self) -> TraversalResult:
        if self.depth_left == 0:
            return self._leaf_result()

        possible_moves = self.state.get_possible_moves()
        if not possible_moves:
            return self._leaf_result()

        analytics = Analytics.for_internal_node()
        ideal_move: Optional[GameState] = None
        ideal_evaluation: Optional[Evaluation] = None
        for move in possible_moves:
            if self.pruning and not self.alpha_beta.is_positive_range():
                # Subtree became fruitless
                break

            child_result = self._child_result(move)
            analytics.add(child_result.analytics)
            self.alpha_beta.update(child_result.evaluation, self.node_type)
            if ideal_evaluation is None or self.node_type.prefers(child_result.evaluation, ideal_evaluation):
                ideal_move = move
                ideal_evaluation = child_result.evaluation

        return TraversalResult(move=ideal_move, evaluation=ideal_evaluation, analytics=analytics)

    def _leaf_result(self) -> TraversalResult:
        evaluation = Evaluation(
            score=self.state.evaluate_score(self.objective_player),
            age=self.depth_left,
        )
        return TraversalResult(move=None, evaluation=evaluation, analytics=Analytics.for_leaf_node())

    def _child_result(self, state_after_move: GameState) -> TraversalResult:
        friendly = state_after_move.get_next_player().is_friends_with(self.objective_player)
        child = DecisionNode(
            self.objective_player,
            state_after_move,
            self.depth_left - 1,
            NodeType.MAX if friendly else NodeType.MIN,
            self.alpha_beta.copy(),
            pruning=self.pruning,
        )
        return child.traverse()
