from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

import chess

MATE_SCORE = 100_000

MATERIAL_VALUES: Dict[chess.PieceType, int] = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}


class ChessPlayer(Enum):
    WHITE = chess.WHITE
    BLACK = chess.BLACK

    @classmethod
    def from_color(cls, color: chess.Color) -> ChessPlayer:
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    def equals(self, other) -> bool:
        return self is other

    def is_friends_with(self, other) -> bool:
        return self.equals(other)


class ChessState:
    """Chess position atop python-chess, searchable by the engine.

    The wrapped board is left as found: successors are built by pushing each
    legal move on a copy. ``last_move`` holds the UCI string of the move that
    produced the position.
    """

    def __init__(self, board: Optional[chess.Board] = None, last_move: Optional[str] = None) -> None:
        # The board is taken over as is; pass a copy to keep using your own
        self.board = board if board is not None else chess.Board()
        self.last_move = last_move

    @classmethod
    def from_fen(cls, fen: str) -> ChessState:
        return cls(chess.Board(fen=fen))

    def get_possible_moves(self) -> List[ChessState]:
        if self.board.is_game_over():
            return []
        successors = []
        for move in self.board.legal_moves:
            board = self.board.copy()
            board.push(move)
            successors.append(ChessState(board, last_move=move.uci()))
        return successors

    def get_next_player(self) -> ChessPlayer:
        return ChessPlayer.from_color(self.board.turn)

    def evaluate_score(self, player: ChessPlayer) -> float:
        white_score = self._evaluate_for_white()
        return white_score if player is ChessPlayer.WHITE else -white_score

    def _evaluate_for_white(self) -> int:
        board = self.board
        if board.is_checkmate():
            return -MATE_SCORE if board.turn == chess.WHITE else MATE_SCORE
        if board.is_game_over():
            # stalemate, insufficient material, fivefold repetition, 75-move rule
            return 0

        score = 0
        for piece_type, value in MATERIAL_VALUES.items():
            score += value * len(board.pieces(piece_type, chess.WHITE))
            score -= value * len(board.pieces(piece_type, chess.BLACK))

        # Mobility of both sides, the opponent's counted after a null move
        mobility = 2 * board.legal_moves.count()
        board.push(chess.Move.null())
        try:
            mobility -= 2 * board.legal_moves.count()
        finally:
            board.pop()
        score += mobility if board.turn == chess.WHITE else -mobility
        return score
