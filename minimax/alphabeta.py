from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .evaluation import EPSILON, Evaluation, NodeType


@dataclass
class AlphaBeta:
    """Alpha/beta pair bounding the scores still worth exploring on a path.

    Each node owns one instance and hands every child its own copy, so a
    cutoff inside one branch never affects the siblings of that branch.
    """

    alpha: float = -math.inf
    beta: float = math.inf

    @classmethod
    def initial(cls) -> AlphaBeta:
        return cls(-math.inf, math.inf)

    def update(self, evaluation: Evaluation, node_type: NodeType) -> None:
        if node_type is NodeType.MAX:
            self.alpha = max(self.alpha, evaluation.score)
        else:
            self.beta = min(self.beta, evaluation.score)

    def is_positive_range(self) -> bool:
        """False once alpha..inf and -inf..beta stop overlapping.

        Scores within EPSILON count as equal, so a range that has closed on a
        single tied score still overlaps. Only a strictly inverted range
        proves the remaining moves cannot win or tie.
        """
        return self.alpha < self.beta + EPSILON

    def copy(self) -> AlphaBeta:
        return replace(self)

    def __str__(self) -> str:
        return f"({self.alpha}, {self.beta})"
