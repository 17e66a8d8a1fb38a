"""Move validation for manually entered moves."""

try:
    from Board import EMPTY
    from Move import in_play_area
    from engine.errors import IllegalMove
except ImportError:
    from Battle_Ataxx_AI.Board import EMPTY
    from Battle_Ataxx_AI.Move import in_play_area
    from Battle_Ataxx_AI.engine.errors import IllegalMove


def check_move(move, board):
    """
    Validate a move for the side to move before it reaches the board.
    Raises IllegalMove on invalid moves.
    """
    if move is None:
        raise IllegalMove("No move given")

    if move.is_pass:
        if board.can_move(board.whose_move):
            raise IllegalMove("Player can move, so may not pass.")
        return True

    if not (in_play_area(move.col0, move.row0) and in_play_area(move.col1, move.row1)):
        raise IllegalMove(f"Move {move} is off the board")
    if board.get(move.col0, move.row0) is not board.whose_move:
        raise IllegalMove(f"No {board.whose_move} piece at {move.col0}{move.row0}")
    if board.get(move.col1, move.row1) is not EMPTY:
        raise IllegalMove(f"Square {move.col1}{move.row1} is not empty")
    if not board.legal_move(move):
        raise IllegalMove(f"Move {move} is out of range")

    return True
