"""Player actions and the per-tick input latch"""
from enum import Enum
from typing import Dict, Optional

import pygame


class Action(Enum):
    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    MOVE_UP = 3     # +depth
    MOVE_DOWN = 4   # -depth
    DROP = 5
    ROTATE_X = 6
    ROTATE_Y = 7
    ROTATE_Z = 8


KEYMAP: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_UP: Action.MOVE_UP,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_SPACE: Action.DROP,
    pygame.K_a: Action.ROTATE_X,
    pygame.K_s: Action.ROTATE_Y,
    pygame.K_d: Action.ROTATE_Z,
}


class InputLatch:
    """Holds one action between ticks; a later key press replaces an earlier one."""
    def __init__(self, keymap: Optional[Dict[int, Action]] = None):
        self.keymap = KEYMAP if keymap is None else keymap
        self.action = Action.NONE

    def feed(self, key: int) -> bool:
        action = self.keymap.get(key)
        if action is None:
            return False
        self.action = action
        return True

    def take(self) -> Action:
        action, self.action = self.action, Action.NONE
        return action
