from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Analytics:
    """Node counters gathered while traversing the game tree.

    Built bottom-up: every node contributes itself and adds the counters of
    the children it explored.
    """

    nodes_evaluated: int = 0
    leaf_nodes_evaluated: int = 0
    internal_nodes_evaluated: int = 0

    @classmethod
    def for_leaf_node(cls) -> Analytics:
        return cls(nodes_evaluated=1, leaf_nodes_evaluated=1, internal_nodes_evaluated=0)

    @classmethod
    def for_internal_node(cls) -> Analytics:
        return cls(nodes_evaluated=1, leaf_nodes_evaluated=0, internal_nodes_evaluated=1)

    def add(self, other: Analytics) -> None:
        self.nodes_evaluated += other.nodes_evaluated
        self.leaf_nodes_evaluated += other.leaf_nodes_evaluated
        self.internal_nodes_evaluated += other.internal_nodes_evaluated

    def __add__(self, other: Analytics) -> Analytics:
        return Analytics(
            nodes_evaluated=self.nodes_evaluated + other.nodes_evaluated,
            leaf_nodes_evaluated=self.leaf_nodes_evaluated + other.leaf_nodes_evaluated,
            internal_nodes_evaluated=self.internal_nodes_evaluated + other.internal_nodes_evaluated,
        )

    def to_dict(self) -> dict:
        return {
            "nodes_evaluated": self.nodes_evaluated,
            "leaf_nodes_evaluated": self.leaf_nodes_evaluated,
            "internal_nodes_evaluated": self.internal_nodes_evaluated,
        }
