from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Scores closer than this are treated as equal and decided by age.
EPSILON = 1e-5


@dataclass(frozen=True)
class Evaluation:
    """Score of a game tree node together with the depth it was found at.

    ``age`` is the search depth that was still left when the score was
    produced. A higher age means the result was found earlier (closer to the
    root), which lets the engine prefer a quick win over a slow one with the
    same score.
    """

    score: float
    age: int

    def is_better_than(self, other: Evaluation) -> bool:
        if abs(self.score - other.score) < EPSILON:
            return self.age > other.age
        return self.score > other.score


def best_of(a: Evaluation, b: Evaluation) -> Evaluation:
    return a if a.is_better_than(b) else b


def worst_of(a: Evaluation, b: Evaluation) -> Evaluation:
    return a if b.is_better_than(a) else b


class NodeType(Enum):
    """Search polarity of a node: maximize or minimize the objective score."""

    MAX = "max"
    MIN = "min"

    def alternate(self) -> NodeType:
        return NodeType.MIN if self is NodeType.MAX else NodeType.MAX

    def prefers(self, candidate: Evaluation, incumbent: Evaluation) -> bool:
        """Whether ``candidate`` should replace ``incumbent`` at this node.

        Ties keep the incumbent, so the first move seen wins.
        """
        if self is NodeType.MAX:
            return candidate.is_better_than(incumbent)
        return incumbent.is_better_than(candidate)
