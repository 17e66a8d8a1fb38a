"""Ataxx board state: bordered flat grid, move application with contagion, and exact undo.

The 7x7 play area sits inside a 2-deep border of permanently BLOCKED squares,
so every square within two rows/columns of a play square is a valid index and
neighborhood scans never need a bounds check.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

try:
    from Move import Move, SIDE, EXTENDED_SIDE, index, neighbor, in_play_area, play_squares
    from engine.errors import IllegalMove, IllegalBlockPlacement, NoHistoryToUndo
except ImportError:
    from Battle_Ataxx_AI.Move import Move, SIDE, EXTENDED_SIDE, index, neighbor, in_play_area, play_squares
    from Battle_Ataxx_AI.engine.errors import IllegalMove, IllegalBlockPlacement, NoHistoryToUndo


# Consecutive jumps (no intervening extend) that end the game.
JUMP_LIMIT = 25


class PieceColor(Enum):
    EMPTY = "-"
    RED = "r"
    BLUE = "b"
    BLOCKED = "X"

    def opposite(self):
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def __str__(self):
        return self.name.capitalize()


EMPTY = PieceColor.EMPTY
RED = PieceColor.RED
BLUE = PieceColor.BLUE
BLOCKED = PieceColor.BLOCKED

# Linear offsets of the 3x3 (contagion) and 5x5 (move range) neighborhoods, center excluded.
ADJACENT = tuple(
    neighbor(0, dc, dr) for dc in (-1, 0, 1) for dr in (-1, 0, 1) if (dc, dr) != (0, 0)
)
IN_RANGE = tuple(
    neighbor(0, dc, dr) for dc in range(-2, 3) for dr in range(-2, 3) if (dc, dr) != (0, 0)
)

INITIAL_PIECES = {
    ("a", "7"): RED,
    ("g", "1"): RED,
    ("a", "1"): BLUE,
    ("g", "7"): BLUE,
}


@dataclass(frozen=True)
class BoardChange:
    """What a mutating Board call did, handed back to the caller instead of a broadcast."""

    kind: str  # "clear", "move", "pass", "undo" or "block"
    mover: Optional[PieceColor] = None
    move: Optional[Move] = None
    converted: Tuple[int, ...] = ()
    squares: Tuple[int, ...] = ()


class Board:
    def __init__(self):
        self.cells = [EMPTY] * (EXTENDED_SIDE * EXTENDED_SIDE)
        self.whose_move = RED
        self.jumps = 0
        self.pieces = {RED: 0, BLUE: 0}
        # (move, converted squares) per applied move or pass
        self.history = []
        # jump counter saved before each extend
        self.saved_jumps = []
        self.clear()

    def clear(self):
        """Reset to the starting layout with no blocks and no history."""
        for sq in range(len(self.cells)):
            r, c = divmod(sq, EXTENDED_SIDE)
            border = r < 2 or r >= SIDE + 2 or c < 2 or c >= SIDE + 2
            self.cells[sq] = BLOCKED if border else EMPTY
        for (col, row), color in INITIAL_PIECES.items():
            self.cells[index(col, row)] = color
        self.whose_move = RED
        self.jumps = 0
        self.pieces = {RED: 2, BLUE: 2}
        self.history = []
        self.saved_jumps = []
        return BoardChange("clear")

    def clone(self):
        new_board = Board.__new__(Board)
        new_board.cells = self.cells[:]
        new_board.whose_move = self.whose_move
        new_board.jumps = self.jumps
        new_board.pieces = dict(self.pieces)
        new_board.history = self.history[:]
        new_board.saved_jumps = self.saved_jumps[:]
        return new_board

    def get(self, col, row=None):
        """Contents of square COL ROW, or of linearized index COL when ROW is omitted."""
        if row is None:
            return self.cells[col]
        return self.cells[index(col, row)]

    def red_pieces(self):
        return self.pieces[RED]

    def blue_pieces(self):
        return self.pieces[BLUE]

    def num_pieces(self, color):
        return self.pieces.get(color, 0)

    def num_moves(self):
        """Moves and passes since the last clear."""
        return len(self.history)

    def num_jumps(self):
        """Consecutive jumps since the last extend (or clear)."""
        return self.jumps

    def all_moves(self):
        return [move for move, _ in self.history]

    def legal_move(self, move):
        """True iff MOVE is legal for the side to move on the current board."""
        if move is None:
            return False
        if move.is_pass:
            return not self.can_move(self.whose_move)
        if not (in_play_area(move.col0, move.row0) and in_play_area(move.col1, move.row1)):
            return False
        return (
            self.cells[move.from_index] is self.whose_move
            and self.cells[move.to_index] is EMPTY
            and 1 <= move.distance() <= 2
        )

    def can_move(self, color):
        """True iff COLOR has any move, ignoring whose turn it is and whether the game is over."""
        cells = self.cells
        for _, _, sq in play_squares():
            if cells[sq] is not color:
                continue
            for delta in IN_RANGE:
                if cells[sq + delta] is EMPTY:
                    return True
        return False

    def legal_moves(self, color=None):
        """Yield every non-pass move for COLOR (default: side to move), source-major."""
        color = self.whose_move if color is None else color
        cells = self.cells
        for _, _, sq in play_squares():
            if cells[sq] is not color:
                continue
            for delta in IN_RANGE:
                if cells[sq + delta] is EMPTY:
                    yield Move.from_squares(sq, sq + delta)

    def make_move(self, move):
        """Apply MOVE (validated before any write) and return the resulting BoardChange."""
        if move is None:
            raise IllegalMove("That move is illegal.")
        if move.is_pass:
            return self.pass_turn()
        if not self.legal_move(move):
            raise IllegalMove(f"Illegal move: {move}")

        mover = self.whose_move
        opp = mover.opposite()
        src, dst = move.from_index, move.to_index
        cells = self.cells

        cells[dst] = mover
        if move.is_jump:
            cells[src] = EMPTY
            self.jumps += 1
        else:
            self.saved_jumps.append(self.jumps)
            self.jumps = 0
            self.pieces[mover] += 1

        converted = []
        for delta in ADJACENT:
            if cells[dst + delta] is opp:
                cells[dst + delta] = mover
                converted.append(dst + delta)
        self.pieces[mover] += len(converted)
        self.pieces[opp] -= len(converted)

        converted = tuple(converted)
        self.history.append((move, converted))
        self.whose_move = opp
        return BoardChange("move", mover, move, converted)

    def pass_turn(self):
        """Pass for the side to move; only legal when it has no move."""
        if self.can_move(self.whose_move):
            raise IllegalMove("Player can move, so may not pass.")
        mover = self.whose_move
        move = Move.pass_move()
        self.history.append((move, ()))
        self.whose_move = mover.opposite()
        return BoardChange("pass", mover, move)

    def undo(self):
        """Reverse the most recent move or pass exactly, replaying its recorded conversions."""
        if not self.history:
            raise NoHistoryToUndo("No moves to undo")
        move, converted = self.history.pop()
        mover = self.whose_move.opposite()

        if not move.is_pass:
            opp = mover.opposite()
            cells = self.cells
            for sq in converted:
                cells[sq] = opp
            self.pieces[mover] -= len(converted)
            self.pieces[opp] += len(converted)

            cells[move.to_index] = EMPTY
            if move.is_jump:
                cells[move.from_index] = mover
                self.jumps -= 1
            else:
                self.jumps = self.saved_jumps.pop()
                self.pieces[mover] -= 1

        self.whose_move = mover
        return BoardChange("undo", mover, move, converted)

    def _block_squares(self, col, row):
        mirror_col = chr(2 * ord("d") - ord(col))
        mirror_row = chr(2 * ord("4") - ord(row))
        return (
            index(col, row),
            index(mirror_col, row),
            index(col, mirror_row),
            index(mirror_col, mirror_row),
        )

    def legal_block(self, col, row=None):
        """True iff a block may go on COL ROW (or "cr") and its reflections across column d and row 4."""
        if row is None:
            if len(col) != 2:
                return False
            col, row = col[0], col[1]
        if not in_play_area(col, row):
            return False
        return all(self.cells[sq] is EMPTY for sq in self._block_squares(col, row))

    def set_block(self, col, row=None):
        """Block COL ROW and its three reflections. Setup only; not undoable."""
        if not self.legal_block(col, row):
            raise IllegalBlockPlacement("illegal block placement")
        if row is None:
            col, row = col[0], col[1]
        squares = tuple(sorted(set(self._block_squares(col, row))))
        for sq in squares:
            self.cells[sq] = BLOCKED
        return BoardChange("block", squares=squares)

    def game_over(self):
        """Neither side can move, a side has no pieces, or JUMP_LIMIT consecutive jumps."""
        return (
            (not self.can_move(RED) and not self.can_move(BLUE))
            or self.pieces[RED] == 0
            or self.pieces[BLUE] == 0
            or self.jumps >= JUMP_LIMIT
        )

    def winner(self):
        """RED or BLUE by piece count, None for a draw."""
        if self.pieces[RED] > self.pieces[BLUE]:
            return RED
        if self.pieces[BLUE] > self.pieces[RED]:
            return BLUE
        return None

    def rows(self):
        """Play-area contents row by row, row 7 first."""
        return [
            [self.cells[index(chr(c), chr(r))] for c in range(ord("a"), ord("g") + 1)]
            for r in range(ord("7"), ord("1") - 1, -1)
        ]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.cells == other.cells
            and self.pieces == other.pieces
            and self.whose_move is other.whose_move
            and self.jumps == other.jumps
        )

    __hash__ = None

    def __str__(self):
        lines = ["==="]
        for row in self.rows():
            lines.append("  " + " ".join(cell.value for cell in row))
        lines.append("===")
        return "\n".join(lines)
