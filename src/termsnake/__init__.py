"""Snake in the terminal: a 32x16 board, arrow keys, and a start/play/end loop."""

from .game import Direction, GamePhase, GameSession, TickResult, new_session
from .grid import Cell, Grid, Position
from .loop import Action, GameLoop, classify_key

__all__ = [
    "Action", "Cell", "Direction", "GameLoop", "GamePhase", "GameSession",
    "Grid", "Position", "TickResult", "classify_key", "new_session",
]
