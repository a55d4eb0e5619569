"""
Pip Stack - Engine Errors

Raised when a caller asks the Game for something its current state does
not allow. Both are caller bugs, never recoverable runtime conditions.
"""


class EngineError(ValueError):
    """Base class for rule engine errors."""


class InvalidActionError(EngineError):
    """The action is not in the current legal action set."""

    def __init__(self, action: object) -> None:
        super().__init__(f"Action {action!r} is not legal in the current state.")
        self.action = action


class GameAlreadyFinishedError(EngineError):
    """An action was submitted after the game was won."""

    def __init__(self, winner: object) -> None:
        super().__init__(f"Game is already finished; winner is {winner}.")
        self.winner = winner
