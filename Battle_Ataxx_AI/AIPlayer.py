"""Automated player backed by the minimax search."""

try:
    from Player import Player
    from Move import Move
    from ai import search_minimax
except ImportError:
    from Battle_Ataxx_AI.Player import Player
    from Battle_Ataxx_AI.Move import Move
    from Battle_Ataxx_AI.ai import search_minimax


class AIPlayer(Player):
    def __init__(self, color, depth=search_minimax.MAX_DEPTH, rng=None, randomize_ties=False):
        super().__init__(color)
        self.depth = depth
        self.rng = rng
        self.randomize_ties = randomize_ties
        self.stats = []

    def next_move(self, board):
        if not board.can_move(self.color):
            return Move.pass_move()
        return search_minimax.choose_move(
            board,
            self.color,
            depth=self.depth,
            rng=self.rng,
            randomize_ties=self.randomize_ties,
            stats=self.stats,
        )
