"""Player interface for manual or automated move sources."""

try:
    from Move import Move
except ImportError:
    from Battle_Ataxx_AI.Move import Move


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return a Move for self.color on BOARD, or None to quit."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Reads moves like "a7-b6" (or "-" to pass) from an input callable."""

    def __init__(self, color, read_line=input):
        super().__init__(color)
        self.read_line = read_line

    def next_move(self, board):
        raw = self.read_line(f"{self.color}: ")
        if raw is None:
            return None
        raw = raw.strip()
        if raw.lower() == "quit":
            return None
        return Move.parse(raw)
