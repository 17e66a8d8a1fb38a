"""Square addressing and the Move value type (extend, jump, or pass)."""

from dataclasses import dataclass
from typing import Optional

# Number of squares on a side of the play area.
SIDE = 7
# Play area plus a 2-deep blocked border on every side.
EXTENDED_SIDE = SIDE + 4

FIRST_COL, LAST_COL = "a", "g"
FIRST_ROW, LAST_ROW = "1", "7"


def index(col, row):
    """Return the linearized index of square COL ROW (border columns/rows allowed)."""
    return (ord(row) - ord(FIRST_ROW) + 2) * EXTENDED_SIDE + (ord(col) - ord(FIRST_COL) + 2)


def neighbor(sq, dc, dr):
    """Index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def col_row(sq):
    """Inverse of index(): return the (col, row) characters of SQ."""
    r, c = divmod(sq, EXTENDED_SIDE)
    return chr(ord(FIRST_COL) + c - 2), chr(ord(FIRST_ROW) + r - 2)


def in_play_area(col, row):
    return FIRST_COL <= col <= LAST_COL and FIRST_ROW <= row <= LAST_ROW


def play_squares():
    """Yield (col, row, index) for every play-area square, a1..g7 column-major."""
    for c in range(ord(FIRST_COL), ord(LAST_COL) + 1):
        for r in range(ord(FIRST_ROW), ord(LAST_ROW) + 1):
            yield chr(c), chr(r), index(chr(c), chr(r))


@dataclass(frozen=True)
class Move:
    """A move from col0/row0 to col1/row1, or a pass when all fields are None."""

    col0: Optional[str] = None
    row0: Optional[str] = None
    col1: Optional[str] = None
    row1: Optional[str] = None

    @classmethod
    def move(cls, col0, row0, col1, row1):
        return cls(col0, row0, col1, row1)

    @classmethod
    def pass_move(cls):
        return cls()

    @classmethod
    def from_squares(cls, sq0, sq1):
        c0, r0 = col_row(sq0)
        c1, r1 = col_row(sq1)
        return cls(c0, r0, c1, r1)

    @classmethod
    def parse(cls, text):
        """
        Parse "c0r0-c1r1" (e.g. "a7-b6") or "-" for a pass.
        Raises ValueError on malformed text.
        """
        text = text.strip().lower()
        if text == "-":
            return cls.pass_move()
        try:
            src, dst = text.split("-")
        except ValueError as exc:
            raise ValueError(f"Invalid move format: {text!r}") from exc
        if len(src) != 2 or len(dst) != 2:
            raise ValueError(f"Invalid move format: {text!r}")
        if not (in_play_area(*src) and in_play_area(*dst)):
            raise ValueError(f"Square off the board: {text!r}")
        return cls(src[0], src[1], dst[0], dst[1])

    @property
    def is_pass(self):
        return self.col0 is None

    @property
    def from_index(self):
        return index(self.col0, self.row0)

    @property
    def to_index(self):
        return index(self.col1, self.row1)

    def distance(self):
        """Chebyshev distance between source and destination (0 for a pass)."""
        if self.is_pass:
            return 0
        return max(abs(ord(self.col1) - ord(self.col0)), abs(ord(self.row1) - ord(self.row0)))

    @property
    def is_extend(self):
        return self.distance() == 1

    @property
    def is_jump(self):
        return self.distance() == 2

    def __str__(self):
        if self.is_pass:
            return "-"
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"
