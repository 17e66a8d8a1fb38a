"""Game loop, command dispatch, and turn management for Ataxx."""

import random
from enum import Enum
from pathlib import Path

try:
    from Board import Board, RED, BLUE
    from Move import Move
    from Player import HumanPlayer
    from AIPlayer import AIPlayer
    from ai import search_minimax
    from engine import referee
    from engine.commands import CommandType, parse_command
    from engine.errors import GameException
except ImportError:
    from Battle_Ataxx_AI.Board import Board, RED, BLUE
    from Battle_Ataxx_AI.Move import Move
    from Battle_Ataxx_AI.Player import HumanPlayer
    from Battle_Ataxx_AI.AIPlayer import AIPlayer
    from Battle_Ataxx_AI.ai import search_minimax
    from Battle_Ataxx_AI.engine import referee
    from Battle_Ataxx_AI.engine.commands import CommandType, parse_command
    from Battle_Ataxx_AI.engine.errors import GameException


HELP_TEXT = """\
Commands:
  start              begin play (setup only)
  block CR           block square CR and its reflections (setup only)
  auto red|blue      let the engine play that color
  manual red|blue    take moves for that color from the input
  C0R0-C1R1          move a piece, e.g. a7-b6
  pass | -           pass (only when no move is available)
  undo               take back the last move or pass
  clear              abandon the game and return to setup
  dump               print the board
  seed N             seed the engine's random source
  load FILE          run commands from FILE
  quit               leave"""

COLORS = {"red": RED, "blue": BLUE}


class State(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class TextReporter:
    """Turns board changes, errors and outcomes into log lines."""

    def __init__(self, logger=print):
        self.logger = logger

    def move(self, change):
        if change.kind == "pass":
            self.logger(f"{change.mover} passes.")
        elif change.kind == "move":
            self.logger(f"{change.mover} moves {change.move}.")

    def error(self, exc):
        self.logger(f"Error: {exc}")

    def outcome(self, winner):
        if winner is None:
            self.logger("Draw.")
        else:
            self.logger(f"{winner} wins.")


class Ataxxgame:
    def __init__(self, board=None, red_player=None, blue_player=None, read_line=input, logger=print,
                 reporter=None, depth=search_minimax.MAX_DEPTH, seed=None, randomize_ties=False):
        self.board = board if board is not None else Board()
        self.read_line = read_line
        self.logger = logger
        self.reporter = reporter if reporter is not None else TextReporter(logger)
        self.depth = depth
        self.randomize_ties = randomize_ties
        self.rng = random.Random(seed)
        self.players = {
            RED: red_player or self.manual_player(RED),
            BLUE: blue_player or self.auto_player(BLUE),
        }
        self.state = State.SETUP
        self.quit_requested = False
        self.winner = None
        self._handlers = {
            CommandType.AUTO: self.do_auto,
            CommandType.MANUAL: self.do_manual,
            CommandType.BLOCK: self.do_block,
            CommandType.CLEAR: self.do_clear,
            CommandType.DUMP: self.do_dump,
            CommandType.HELP: self.do_help,
            CommandType.LOAD: self.do_load,
            CommandType.PASS: self.do_pass,
            CommandType.PIECEMOVE: self.do_move,
            CommandType.SEED: self.do_seed,
            CommandType.START: self.do_start,
            CommandType.UNDO: self.do_undo,
            CommandType.QUIT: self.do_quit,
        }

    def auto_player(self, color):
        return AIPlayer(color, depth=self.depth, rng=self.rng, randomize_ties=self.randomize_ties)

    def manual_player(self, color):
        return HumanPlayer(color, read_line=self.read_manual_move)

    def run(self):
        """Play games until a quit command or end of input."""
        while not self.quit_requested:
            while self.state == State.SETUP and not self.quit_requested:
                self.do_command("ataxx: ")
            if self.state == State.PLAYING:
                self.play()
            while self.state == State.FINISHED and not self.quit_requested:
                self.do_command("ataxx: ")

    def play(self):
        """
        Alternate players until the game ends or play is interrupted.
        Returns the winner (RED/BLUE), None for a draw or an interrupted game.
        """
        self.state = State.PLAYING
        self.winner = None
        while self.state == State.PLAYING and not self.board.game_over():
            color = self.board.whose_move
            player = self.players[color]
            try:
                move = player.next_move(self.board)
                if self.state != State.PLAYING or move is None:
                    continue
                referee.check_move(move, self.board)
                change = self.board.make_move(move)
            except ValueError as exc:
                self.reporter.error(exc)
                continue
            self.reporter.move(change)

        if self.state == State.PLAYING:
            self.winner = self.board.winner()
            self.reporter.outcome(self.winner)
            self.state = State.FINISHED
        return self.winner

    def read_manual_move(self, prompt):
        """
        Read input for a manual player, executing any non-move commands on the way.
        Returns the move text, or None once play is interrupted or a command
        (such as undo) hands the turn to the other side.
        """
        color = self.board.whose_move
        while self.state == State.PLAYING and self.board.whose_move is color:
            line = self._read(prompt)
            if line is None:
                return None
            try:
                cmnd = parse_command(line)
                if cmnd is None:
                    continue
                if cmnd.type == CommandType.PIECEMOVE:
                    return "{}{}-{}{}".format(*cmnd.operands)
                if cmnd.type == CommandType.PASS:
                    return "-"
                self._handlers[cmnd.type](*cmnd.operands)
            except GameException as exc:
                self.reporter.error(exc)
        return None

    def do_command(self, prompt):
        """Read and execute one command."""
        line = self._read(prompt)
        if line is None:
            return
        self.execute(line)

    def execute(self, line):
        try:
            cmnd = parse_command(line)
            if cmnd is not None:
                self._handlers[cmnd.type](*cmnd.operands)
        except GameException as exc:
            self.reporter.error(exc)

    def _read(self, prompt):
        try:
            line = self.read_line(prompt)
        except EOFError:
            line = None
        if line is None:
            self.do_quit()
        return line

    def _check_state(self, command, *states):
        if self.state not in states:
            raise GameException(f"'{command}' command is not allowed now.")

    # Command processors

    def do_auto(self, color):
        self.players[COLORS[color]] = self.auto_player(COLORS[color])

    def do_manual(self, color):
        self.players[COLORS[color]] = self.manual_player(COLORS[color])

    def do_block(self, square):
        self._check_state("block", State.SETUP)
        self.board.set_block(square)

    def do_clear(self):
        self.board.clear()
        self.state = State.SETUP
        self.winner = None

    def do_dump(self):
        self.logger(str(self.board))

    def do_help(self):
        self.logger(HELP_TEXT)

    def do_load(self, filename):
        try:
            lines = Path(filename).read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise GameException(f"Cannot open file {filename}") from exc
        for line in lines:
            cmnd = parse_command(line)
            if cmnd is not None:
                self._handlers[cmnd.type](*cmnd.operands)

    def do_pass(self):
        self._check_state("pass", State.SETUP, State.PLAYING)
        move = Move.pass_move()
        referee.check_move(move, self.board)
        self.reporter.move(self.board.make_move(move))

    def do_move(self, c0, r0, c1, r1):
        self._check_state("move", State.SETUP, State.PLAYING)
        move = Move.move(c0, r0, c1, r1)
        referee.check_move(move, self.board)
        self.reporter.move(self.board.make_move(move))

    def do_seed(self, value):
        self.rng.seed(int(value))

    def do_start(self):
        self._check_state("start", State.SETUP)
        self.state = State.PLAYING

    def do_undo(self):
        self._check_state("undo", State.SETUP, State.PLAYING)
        self.board.undo()

    def do_quit(self):
        self.quit_requested = True
        self.state = State.FINISHED
