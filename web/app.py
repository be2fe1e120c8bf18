from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from flask import Flask, jsonify, request

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from minimax import Engine, MinimaxError
from minimax.config import EngineSettings, get_engine_settings, setup_logging
from minimax.games import IllegalMoveError, TicTacToePlayer, TicTacToeState

logger = logging.getLogger(__name__)


class BadRequestError(ValueError):
    pass


def _int_field(payload: Dict[str, object], key: str, default: Optional[int] = None) -> int:
    value = payload.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadRequestError(f"Invalid {key}: {value!r}") from None


def _snapshot(state: TicTacToeState, engine: Optional[Engine]) -> Dict[str, object]:
    winner = state.winner()
    analytics = None
    if engine is not None:
        try:
            analytics = engine.get_analytics().to_dict()
        except MinimaxError:
            analytics = None
    return {
        "board": state.render(),
        "turn": str(state.get_next_player()),
        "legal_moves": [] if state.is_game_over() else [list(field) for field in state.empty_fields()],
        "game_over": state.is_game_over(),
        "winner": str(winner) if winner else None,
        "last_move": list(state.last_move) if state.last_move else None,
        "analytics": analytics,
    }


def create_app(settings: Optional[EngineSettings] = None) -> Flask:
    """Tic-tac-toe against the engine, over a small JSON API."""
    app = Flask(__name__)
    settings = settings or get_engine_settings()

    # Single game per app instance
    session: Dict[str, object] = {"state": TicTacToeState(), "engine": None}

    def _engine_for(player: TicTacToePlayer, depth: int) -> Engine:
        engine = Engine(player, depth, settings=settings)
        session["engine"] = engine
        return engine

    def _engine_reply(state: TicTacToeState, depth: int) -> TicTacToeState:
        engine = _engine_for(state.get_next_player(), depth)
        return engine.decide(state)

    @app.errorhandler(BadRequestError)
    def handle_bad_request(exc: BadRequestError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(MinimaxError)
    def handle_engine_error(exc: MinimaxError):
        logger.warning("engine error: %s", exc)
        return jsonify({"error": str(exc)}), 400

    @app.get("/api/state")
    def api_state():
        return jsonify(_snapshot(session["state"], session["engine"]))

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        color = (data.get("color") or "x").lower()
        depth = _int_field(data, "depth", settings.default_depth)
        if color not in ("x", "o"):
            return jsonify({"error": f"Unknown color: {color}"}), 400

        state = TicTacToeState()
        session["engine"] = None
        ai_move = None
        # If the player chose O, the engine (X) opens
        if color == "o":
            state = _engine_reply(state, depth)
            ai_move = list(state.last_move)
        session["state"] = state

        snap = _snapshot(state, session["engine"])
        snap["ai_move"] = ai_move
        return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict) or "row" not in payload or "col" not in payload:
            return jsonify({"error": "Missing move"}), 400
        depth = _int_field(payload, "depth", settings.default_depth)
        row, col = _int_field(payload, "row"), _int_field(payload, "col")

        state: TicTacToeState = session["state"]
        try:
            state = state.play(row, col)
        except IllegalMoveError as exc:
            return jsonify({"error": str(exc)}), 400

        ai_move = None
        if not state.is_game_over():
            state = _engine_reply(state, depth)
            ai_move = list(state.last_move)
        session["state"] = state

        snap = _snapshot(state, session["engine"])
        snap["ai_move"] = ai_move
        return jsonify(snap)

    return app


if __name__ == "__main__":
    setup_logging()
    create_app().run(host="0.0.0.0", port=5000, debug=True)
