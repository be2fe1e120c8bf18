from __future__ import annotations

import copy
from enum import Enum
from typing import List, Optional, Tuple

from .errors import IllegalMoveError

WIN_SCORE = 999

LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    # rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((2, 0), (1, 1), (0, 2)),
)


class TicTacToePlayer(Enum):
    X = "x"
    O = "o"

    def equals(self, other) -> bool:
        return self is other

    def is_friends_with(self, other) -> bool:
        return self.equals(other)

    def opponent(self) -> TicTacToePlayer:
        return TicTacToePlayer.O if self is TicTacToePlayer.X else TicTacToePlayer.X

    def __str__(self) -> str:
        return self.value


Cells = Tuple[Tuple[Optional[TicTacToePlayer], ...], ...]

EMPTY_CELLS: Cells = ((None, None, None), (None, None, None), (None, None, None))


class TicTacToeState:
    """Immutable 3x3 tic-tac-toe position.

    Tracks cell ownership and whose turn it is. Scores are 999 for a win,
    -999 for a loss and 0 for anything else.
    """

    def __init__(
        self,
        cells: Cells = EMPTY_CELLS,
        turn: TicTacToePlayer = TicTacToePlayer.X,
        last_move: Optional[Tuple[int, int]] = None,
    ) -> None:
        self.cells = cells
        self.turn = turn
        self.last_move = last_move

    def cell(self, row: int, column: int) -> Optional[TicTacToePlayer]:
        return self.cells[row][column]

    def play(self, row: int, column: int) -> TicTacToeState:
        """Return the state after the player to move marks (row, column)."""
        if not (0 <= row < 3 and 0 <= column < 3):
            raise IllegalMoveError(f"Illegal move: ({row}, {column}) is off the board")
        if self.cells[row][column] is not None:
            raise IllegalMoveError(f"Illegal move: ({row}, {column}) is taken")
        if self.winner() is not None:
            raise IllegalMoveError("Illegal move: the game is over")
        cells = tuple(
            tuple(self.turn if (r, c) == (row, column) else owner for c, owner in enumerate(cells_row))
            for r, cells_row in enumerate(self.cells)
        )
        return self._successor(cells, (row, column))

    def _successor(self, cells: Cells, move: Tuple[int, int]) -> TicTacToeState:
        # copy.copy keeps subclasses (and their behavior) across moves
        successor = copy.copy(self)
        successor.cells = cells
        successor.turn = self.turn.opponent()
        successor.last_move = move
        return successor

    def has_line(self, player: TicTacToePlayer) -> bool:
        return any(all(self.cells[r][c] is player for r, c in line) for line in LINES)

    def winner(self) -> Optional[TicTacToePlayer]:
        for player in TicTacToePlayer:
            if self.has_line(player):
                return player
        return None

    def empty_fields(self) -> List[Tuple[int, int]]:
        return [(r, c) for r in range(3) for c in range(3) if self.cells[r][c] is None]

    def filled_count(self) -> int:
        return 9 - len(self.empty_fields())

    def is_game_over(self) -> bool:
        return self.winner() is not None or not self.empty_fields()

    def get_possible_moves(self) -> List[TicTacToeState]:
        if self.winner() is not None:
            return []
        return [self.play(row, column) for row, column in self.empty_fields()]

    def get_next_player(self) -> TicTacToePlayer:
        return self.turn

    def evaluate_score(self, player: TicTacToePlayer) -> float:
        if self.has_line(player):
            return WIN_SCORE
        if self.has_line(player.opponent()):
            return -WIN_SCORE
        return 0

    def render(self) -> List[str]:
        return ["".join(str(owner) if owner else " " for owner in row) for row in self.cells]

    def __str__(self) -> str:
        return "\n".join(self.render()) + "\n"
