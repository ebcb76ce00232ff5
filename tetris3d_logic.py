"""
Game logic: the fixed-step tick state machine.

Each tick applies at most one pending action, then either counts the gravity
timer down or, when it reaches zero, locks the block (if it rests on something)
or moves it one cell down.
"""
from enum import Enum
from typing import Mapping, Optional

from tetris3d_block import Block
from tetris3d_board import Board
from tetris3d_config import CONFIG
from tetris3d_factory import PieceFactory
from tetris3d_input import Action
from tetris3d_log import get_logger

logger = get_logger(__name__)

MOVES = {
    Action.MOVE_LEFT: (-1, 0, 0),
    Action.MOVE_RIGHT: (1, 0, 0),
    Action.MOVE_UP: (0, 1, 0),
    Action.MOVE_DOWN: (0, -1, 0),
}


class GameState(Enum):
    PLAYING = "playing"
    OVER = "over"


class GameLogic:
    def __init__(self, factory: Optional[PieceFactory] = None, config: Mapping = CONFIG):
        self.config = config
        self.factory = factory if factory is not None else PieceFactory()
        self.width = int(config["WIDTH"])
        self.depth = int(config["DEPTH"])
        self.height = int(config["HEIGHT"])
        self.gravity_ticks = int(config["GRAVITY_TICKS"])
        self.points_per_level = int(config["POINTS_PER_LEVEL"])
        self.new_game()

    def new_game(self) -> None:
        self.board = Board(self.width, self.depth, self.height)
        self.score = 0
        self.levels_cleared = 0
        self.state = GameState.PLAYING
        self.countdown = 0
        self.pending = Action.NONE
        self.block = self._spawn()

    @property
    def spawn_anchor(self):
        # Above the ceiling: a new block falls into view
        return (self.width // 3, self.depth // 3, self.height)

    @property
    def is_over(self) -> bool:
        return self.state is GameState.OVER

    def _spawn(self) -> Block:
        return self.factory.spawn_at(*self.spawn_anchor)

    def push(self, action: Action) -> None:
        """Latch the action for the next tick (last call wins)."""
        self.pending = action

    # ---------- tick ----------
    def tick(self) -> None:
        if self.is_over:
            return

        action, self.pending = self.pending, Action.NONE
        self._apply(action)

        if self.countdown == 0:
            if self.board.is_in_contact(self.block):
                if self.board.add_block(self.block):
                    self.state = GameState.OVER
                    logger.info("Game over, final score %d", self.score)
                    return
                self._score_levels(self.board.reduce_levels())
                self.block = self._spawn()
            else:
                # no contact => the cell below every element is free
                self.block = self.block.translated(0, 0, -1)
            # the tick that stepped counts as the first of the interval
            self.countdown = max(0, self.gravity_ticks - 1)
        else:
            self.countdown -= 1

    def _apply(self, action: Action) -> None:
        if action is Action.NONE:
            return
        if action in MOVES:
            self._try(self.block.translated(*MOVES[action]))
        elif action is Action.ROTATE_X:
            self._try(self.block.rotated_x())
        elif action is Action.ROTATE_Y:
            self._try(self.block.rotated_y())
        elif action is Action.ROTATE_Z:
            self._try(self.block.rotated_z())
        elif action is Action.DROP:
            self.block = self.board.drop_position(self.block)
            self.countdown = 0
        else:
            raise ValueError(f"Unhandled action {action!r}")

    def _try(self, candidate: Block) -> bool:
        if self.board.can_place_legally(candidate):
            self.block = candidate
            return True
        return False

    def _score_levels(self, reduced: int) -> None:
        if reduced:
            self.levels_cleared += reduced
            self.score += self.points_per_level * reduced
            logger.info("Cleared %d level(s), score %d", reduced, self.score)
        else:
            logger.debug("Locked block, no levels cleared")
