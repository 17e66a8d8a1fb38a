"""Game error types raised by the board, referee, and command layer."""


class GameException(ValueError):
    """Base class for user-facing game errors."""


class IllegalMove(GameException):
    pass


class IllegalBlockPlacement(GameException):
    pass


class NoHistoryToUndo(GameException):
    pass


class UnknownCommand(GameException):
    pass
