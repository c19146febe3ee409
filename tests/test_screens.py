from termsnake.screens import center_lines, end_overlay, score_text, start_overlay


def test_score_text():
    assert score_text(0) == "Score: 0"
    assert score_text(42) == "Score: 42"


def test_overlays():
    assert start_overlay() == ["SNAKE", "Press any key to start"]
    assert end_overlay(7) == ["GAME OVER", "Score: 7", "Press any key to continue"]


def test_center_lines():
    placed = center_lines(["ab", "abcd"], 10, 6)
    assert placed == [(4, 2, "ab"), (3, 3, "abcd")]


def test_center_lines_cuts_long_text():
    placed = center_lines(["abcdefgh"], 4, 1)
    assert placed == [(0, 0, "abcd")]
