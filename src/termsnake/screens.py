# screens.py
"""Text shown on top of the board: score readout and start/end overlays."""
from typing import List

TITLE = "SNAKE"
START_PROMPT = "Press any key to start"
GAME_OVER = "GAME OVER"
RESTART_PROMPT = "Press any key to continue"


def score_text(points: int) -> str:
    return f"Score: {points}"


def start_overlay() -> List[str]:
    return [TITLE, START_PROMPT]


def end_overlay(points: int) -> List[str]:
    return [GAME_OVER, score_text(points), RESTART_PROMPT]


def center_lines(lines: List[str], width: int, height: int):
    """
    Place overlay lines in the middle of a width x height area.
    Returns (x, y, text) triples; lines wider than the area are cut.
    """
    lines = [line[:width] for line in lines][:height]
    top = (height - len(lines)) // 2
    return [
        ((width - len(line)) // 2, top + i, line)
        for i, line in enumerate(lines)
    ]
