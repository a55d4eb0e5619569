"""
Pip Stack - Game Controller

Owns the authoritative game state, applies actions and decides the winner.

Turn flow:
- The player to move picks one action from ``Game.actions``
- Add places a new value-1 stack; Merge lifts a stack onto a friendly one;
  Move slides a stack exactly as many steps as its pips
- A merge producing more than 6 pips wins on the spot (overflow win)
- Otherwise the turn passes; a player left with no legal action loses
  (blockade win for the other color)
"""

import logging
from typing import ClassVar, Mapping

from src.engine.actions import Action, AddAction, MergeAction, MoveAction, action_origin
from src.engine.base import Color, Die, Position
from src.engine.board import Board
from src.engine.errors import GameAlreadyFinishedError, InvalidActionError
from src.engine.movegen import legal_actions

logger = logging.getLogger(__name__)


class Game:
    """
    Single-owner game state machine.

    The game is in progress while ``winner`` is None and frozen once it is
    set. Every mutation goes through ``perform_action``.
    """

    FIRST_PLAYER: ClassVar[Color] = Color.RED
    SEED_DICE: ClassVar[tuple[tuple[Position, Color], ...]] = (
        (Position(0, 0), Color.RED),
        (Position(0, 1), Color.BLACK),
    )

    def __init__(self) -> None:
        self._board = Board({pos: Die(color) for pos, color in self.SEED_DICE})
        self._dice_in_play = {color: self._board.count(color) for color in Color}
        self._turn = self.FIRST_PLAYER
        self._winner: Color | None = None
        self._actions = legal_actions(self._board, self._turn, self._dice_in_play)

    @classmethod
    def from_board(
        cls,
        dice: Mapping[Position, Die],
        turn: Color = Color.RED,
        dice_in_play: Mapping[Color, int] | None = None,
    ) -> "Game":
        """
        Build a game from an arbitrary layout.

        Args:
            dice: Stacks on the board
            turn: Color to move
            dice_in_play: Stacks in play per color (defaults to the count on
                          the board)

        Returns:
            Game with legal actions computed for ``turn``. If ``turn`` has
            no legal action the other color is already the winner.
        """
        game = cls.__new__(cls)
        game._board = Board(dice)
        game._dice_in_play = {color: game._board.count(color) for color in Color}
        if dice_in_play is not None:
            game._dice_in_play.update(dice_in_play)
        game._turn = turn
        game._winner = None
        game._actions = legal_actions(game._board, turn, game._dice_in_play)
        if not game._actions:
            game._winner = turn.opponent
        return game

    # -- Read-only accessors ---------------------------------------------

    @property
    def board(self) -> Mapping[Position, Die]:
        """Read-only view of positions to dice."""
        return self._board.view()

    @property
    def actions(self) -> frozenset[Action]:
        """Legal actions for the player to move."""
        return self._actions

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def is_finished(self) -> bool:
        return self._winner is not None

    def dice_in_play(self, color: Color) -> int:
        """Stacks of ``color`` currently in play."""
        return self._dice_in_play[color]

    def actions_from(self, pos: Position) -> frozenset[Action]:
        """Legal merges and moves starting from ``pos``."""
        return frozenset(a for a in self._actions if action_origin(a) == pos)

    # -- Mutation --------------------------------------------------------

    def perform_action(self, action: Action) -> Color | None:
        """
        Apply a legal action and pass the turn.

        Args:
            action: One of the actions in ``self.actions``

        Returns:
            The winner after this action, or None if play continues

        Raises:
            GameAlreadyFinishedError: If the game already has a winner
            InvalidActionError: If the action is not currently legal
        """
        if self._winner is not None:
            logger.warning("Rejected %s: game already won by %s", action, self._winner.value)
            raise GameAlreadyFinishedError(self._winner)
        if action not in self._actions:
            logger.warning("Rejected illegal action %s for %s", action, self._turn.value)
            raise InvalidActionError(action)

        logger.debug("%s performs %s", self._turn.value, action)

        match action:
            case AddAction(pos=pos):
                self._board.place(pos, Die(self._turn))
                self._dice_in_play[self._turn] += 1
            case MergeAction(origin=origin, target=target):
                if self._merge(origin, target):
                    self._winner = self._turn
                    logger.info("%s wins by overflow at %s", self._turn.value, target)
                    return self._winner
            case MoveAction(origin=origin, target=target):
                self._board.place(target, self._board.remove(origin))

        self._turn = self._turn.opponent
        self._actions = legal_actions(self._board, self._turn, self._dice_in_play)
        if not self._actions:
            self._winner = self._turn.opponent
            logger.info("%s wins by blockade", self._winner.value)
        return self._winner

    def _merge(self, origin: Position, target: Position) -> bool:
        """Stack ``origin`` onto ``target``; True if the result overflows.

        An overflowing merge leaves the board untouched so no stack above
        Die.MAX_VALUE is ever stored.
        """
        moving = self._board.get(origin)
        base = self._board.get(target)
        assert moving is not None and base is not None, "merge between empty cells"

        total = moving.value + base.value
        if total > Die.MAX_VALUE:
            return True

        self._board.remove(origin)
        self._board.replace(target, Die(base.color, total))
        self._dice_in_play[self._turn] -= 1
        return False

    def __repr__(self) -> str:
        dice = ", ".join(f"{pos}={die}" for pos, die in sorted(
            self._board.view().items(), key=lambda item: (item[0].y, item[0].x)
        ))
        return f"Game(turn={self._turn.value}, winner={self._winner}, board={{{dice}}})"
