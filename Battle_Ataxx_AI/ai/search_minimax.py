"""Fixed-depth minimax with alpha-beta pruning over a single cloned board."""

import time

from . import heuristic

try:
    from Board import RED
    from Move import Move
except ImportError:
    from Battle_Ataxx_AI.Board import RED
    from Battle_Ataxx_AI.Move import Move


MAX_DEPTH = 4
INFTY = heuristic.INFTY
WINNING_VALUE = heuristic.WINNING_VALUE


class MinimaxSearcher:
    """
    Searches for `color` with sense +1 (red maximizes) or -1 (blue minimizes).
    The board handed to choose_move is cloned once; every branch is explored by
    make/undo on that clone, never by copying.
    """

    def __init__(self, color, depth=MAX_DEPTH, rng=None, randomize_ties=False, stats=None):
        self.color = color
        self.depth = depth
        self.rng = rng
        self.randomize_ties = randomize_ties
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.last_found_move = None
        self.root_score = None

    def choose_move(self, board):
        """Return the best move for self.color, or a pass if the search records none."""
        self.start_time = time.time()
        self.node_counter = 0
        self.last_found_move = None

        search_board = board.clone()
        sense = 1 if self.color is RED else -1
        self.root_score = self._find_move(search_board, self.depth, True, sense, -INFTY, INFTY)

        if self.last_found_move is None:
            self.last_found_move = Move.pass_move()

        if self.stats_list is not None:
            self._record_stats()

        return self.last_found_move

    def _candidates(self, board):
        moves = list(board.legal_moves())
        if self.randomize_ties and self.rng is not None:
            self.rng.shuffle(moves)
        return moves

    def _find_move(self, board, depth, save_move, sense, alpha, beta):
        """
        Return the value of BOARD, searching DEPTH plies. The value is maximal
        (or >= beta) when SENSE is 1 and minimal (or <= alpha) when SENSE is -1.
        Records the move achieving it in last_found_move iff SAVE_MOVE.
        """
        self.node_counter += 1

        if board.game_over():
            # Signed by which side leads on pieces, not by whose turn it is.
            return heuristic.terminal_score(board)
        if depth == 0:
            return heuristic.static_score(board)

        candidates = self._candidates(board)
        if not candidates:
            # Side to move is stuck but the game goes on: it must pass.
            board.pass_turn()
            try:
                return self._find_move(board, depth - 1, False, -sense, alpha, beta)
            finally:
                board.undo()

        end_val = alpha if sense == 1 else beta
        for move in candidates:
            board.make_move(move)
            try:
                value = self._find_move(board, depth - 1, False, -sense, alpha, beta)
            finally:
                board.undo()

            if sense == 1:
                if value > alpha:
                    alpha = value
                    end_val = alpha
                    if save_move:
                        self.last_found_move = move
            else:
                if value < beta:
                    beta = value
                    end_val = beta
                    if save_move:
                        self.last_found_move = move

            if beta <= alpha:
                break

        return end_val

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": self.color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
            "score": self.root_score,
        })


def choose_move(board, color, depth=MAX_DEPTH, rng=None, randomize_ties=False, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    The caller passes instead of searching when `color` cannot move.
    """
    searcher = MinimaxSearcher(
        color=color,
        depth=depth,
        rng=rng,
        randomize_ties=randomize_ties,
        stats=stats,
    )
    return searcher.choose_move(board)
