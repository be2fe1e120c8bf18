from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .errors import IllegalMoveError

SIZE = 8

DIRECTIONS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx != 0 or dy != 0
)


class ReversiPlayer(Enum):
    BLUE = "B"
    RED = "R"

    def equals(self, other) -> bool:
        return self is other

    def is_friends_with(self, other) -> bool:
        return self.equals(other)

    def opponent(self) -> ReversiPlayer:
        return ReversiPlayer.RED if self is ReversiPlayer.BLUE else ReversiPlayer.BLUE


Cells = Tuple[Tuple[Optional[ReversiPlayer], ...], ...]


def _starting_cells() -> Cells:
    cells = [[None] * SIZE for _ in range(SIZE)]
    cells[3][3] = ReversiPlayer.BLUE
    cells[3][4] = ReversiPlayer.RED
    cells[4][3] = ReversiPlayer.RED
    cells[4][4] = ReversiPlayer.BLUE
    return tuple(tuple(row) for row in cells)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class ReversiState:
    """Immutable 8x8 reversi position.

    A placement must outflank at least one line of opponent disks; every
    outflanked line is flipped. A player without legal placements passes,
    and the game ends when both players in a row cannot move.
    """

    def __init__(
        self,
        cells: Optional[Cells] = None,
        turn: ReversiPlayer = ReversiPlayer.BLUE,
        last_player_passed: bool = False,
        last_move: Optional[Tuple[int, int]] = None,
    ) -> None:
        self.cells = cells if cells is not None else _starting_cells()
        self.turn = turn
        self.last_player_passed = last_player_passed
        self.last_move = last_move

    @staticmethod
    def is_within_bounds(row: int, column: int) -> bool:
        return 0 <= row < SIZE and 0 <= column < SIZE

    def cell(self, row: int, column: int) -> Optional[ReversiPlayer]:
        return self.cells[row][column]

    def is_owned_by(self, row: int, column: int, player: ReversiPlayer) -> bool:
        return self.is_within_bounds(row, column) and self.cells[row][column] is player

    def count_owned(self, player: ReversiPlayer) -> int:
        return sum(1 for row in self.cells for owner in row if owner is player)

    def empty_fields(self) -> Iterator[Tuple[int, int]]:
        for row in range(SIZE):
            for column in range(SIZE):
                if self.cells[row][column] is None:
                    yield row, column

    def _anchor_pieces(self, row: int, column: int) -> Iterator[Tuple[int, int]]:
        """Own disks closing a line of opponent disks, one per direction."""
        opponent = self.turn.opponent()
        for dx, dy in DIRECTIONS:
            if not self.is_owned_by(row + dy, column + dx, opponent):
                continue
            for i in range(2, SIZE):
                anchor_row, anchor_column = row + dy * i, column + dx * i
                if self.is_owned_by(anchor_row, anchor_column, self.turn):
                    yield anchor_row, anchor_column
                    break
                if not self.is_owned_by(anchor_row, anchor_column, opponent):
                    # empty or off the board
                    break

    def is_legal_move(self, row: int, column: int) -> bool:
        if not self.is_within_bounds(row, column) or self.cells[row][column] is not None:
            return False
        return next(self._anchor_pieces(row, column), None) is not None

    def play(self, row: int, column: int) -> ReversiState:
        if not self.is_legal_move(row, column):
            raise IllegalMoveError("Illegal move")

        cells = [list(cells_row) for cells_row in self.cells]
        cells[row][column] = self.turn
        for anchor_row, anchor_column in self._anchor_pieces(row, column):
            d_row = _sign(anchor_row - row)
            d_column = _sign(anchor_column - column)
            for i in range(1, SIZE):
                capture_row, capture_column = row + d_row * i, column + d_column * i
                if (capture_row, capture_column) == (anchor_row, anchor_column):
                    break
                cells[capture_row][capture_column] = self.turn

        return ReversiState(
            cells=tuple(tuple(cells_row) for cells_row in cells),
            turn=self.turn.opponent(),
            last_player_passed=False,
            last_move=(row, column),
        )

    def pass_turn(self) -> ReversiState:
        if self.last_player_passed:
            raise IllegalMoveError("Cannot pass after the previous player passed.")
        return ReversiState(
            cells=self.cells,
            turn=self.turn.opponent(),
            last_player_passed=True,
            last_move=None,
        )

    def get_possible_moves(self) -> List[ReversiState]:
        moves = [self.play(row, column) for row, column in self.empty_fields() if self.is_legal_move(row, column)]
        if not moves and not self.last_player_passed:
            moves.append(self.pass_turn())
        return moves

    def get_next_player(self) -> ReversiPlayer:
        return self.turn

    def evaluate_score(self, player: ReversiPlayer) -> float:
        return self.count_owned(player) - self.count_owned(player.opponent())
