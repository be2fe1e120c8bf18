"""Contracts a game has to fulfil to be searched by the engine.

Moves are represented by the state they lead to: ``get_possible_moves``
returns successor states, and the engine hands back the successor it picked.
States are treated as immutable values; producing a successor must never
change the source state.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Player(Protocol):
    """A participant, with a notion of self and of alliance."""

    def equals(self, other: Player) -> bool:
        """Whether ``other`` is this very player. Must hold for ``self``."""
        ...

    def is_friends_with(self, other: Player) -> bool:
        """Whether ``other`` shares this player's interest (multi-player games).

        Implied by ``equals``.
        """
        ...


@runtime_checkable
class GameState(Protocol):
    """The state of a game at one turn."""

    def get_possible_moves(self) -> Sequence[GameState]:
        """Successor states for every legal move. Empty when the game is over."""
        ...

    def get_next_player(self) -> Player:
        """The player whose turn it is in this state."""
        ...

    def evaluate_score(self, player: Player) -> float:
        """How favorable this state is for ``player``; higher is better.

        The scale is up to the game, but absolute wins and losses must score
        far beyond any heuristic value of an unfinished game.
        """
        ...
