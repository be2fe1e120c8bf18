class IllegalMoveError(ValueError):
    """Raised when a game is asked to apply a move its rules forbid."""
