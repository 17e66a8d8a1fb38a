"""Static evaluation for Ataxx positions (positive favors red)."""

try:
    from Board import RED, BLUE
except ImportError:
    from Battle_Ataxx_AI.Board import RED, BLUE


# Magnitude of a decided game. Must exceed any static score, which is bounded by
# the number of play squares (49).
WINNING_VALUE = 10 ** 6
INFTY = 10 ** 9


def static_score(board):
    """Red piece count minus blue piece count."""
    return board.red_pieces() - board.blue_pieces()


def terminal_score(board):
    """
    Score of a finished game from red's point of view: +WINNING_VALUE if red
    holds more pieces, -WINNING_VALUE if blue does, 0 for a drawn count.
    """
    red, blue = board.num_pieces(RED), board.num_pieces(BLUE)
    if red > blue:
        return WINNING_VALUE
    if blue > red:
        return -WINNING_VALUE
    return 0
