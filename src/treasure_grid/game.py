"""Treasure Grid game implementation."""

from typing import Dict, List, Optional, Tuple, Any
from enum import Enum

from .board import Board, INITIAL_LAYOUT, TREASURE, EMPTY, PLAYER, TREASURES_TO_WIN


class Direction(Enum):
    UP = "W"
    LEFT = "A"
    DOWN = "S"
    RIGHT = "D"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]


DIRECTION_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

QUIT_TOKEN = "Q"
VALID_TOKENS = [d.value for d in Direction] + [QUIT_TOKEN]

TREASURE_LABEL = "Treasure"
PICKUP_MESSAGE = "You collected a treasure!"
WIN_MESSAGE = "You collected all treasures. You win!"


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"
    QUIT = "quit"


class TreasureGame:
    def __init__(self, layout: Tuple[str, ...] = INITIAL_LAYOUT):
        self.layout = layout
        self.treasures_to_win = TREASURES_TO_WIN

        self.board: Optional[Board] = None
        self.player_position: Optional[Tuple[int, int]] = None
        self.collected_treasures: List[str] = []
        self.player_path: List[Tuple[int, int]] = []
        self.state = GameState.PLAYING
        self.steps = 0

    def reset(self) -> str:
        self.board = Board(self.layout)
        self.player_position = self.board.player_position()
        self.collected_treasures = []
        self.player_path = [self.player_position]
        self.state = GameState.PLAYING
        self.steps = 0
        return self.render()

    def render(self) -> str:
        if self.board is None:
            return ""
        return self.board.render()

    @property
    def is_over(self) -> bool:
        return self.state != GameState.PLAYING

    @property
    def score(self) -> int:
        return len(self.collected_treasures)

    def parse_token(self, token: str) -> Optional[str]:
        """Normalize a move token, or return None if it is not one of W/A/S/D/Q."""
        if token is None:
            return None
        token = token.strip().upper()
        if token in VALID_TOKENS:
            return token
        return None

    def candidate_position(self, direction: Direction) -> Tuple[int, int]:
        row, col = self.player_position
        d_row, d_col = direction.delta
        return row + d_row, col + d_col

    def _info(self, was_valid: bool) -> Dict[str, Any]:
        return {
            "validActions": [] if self.is_over else list(VALID_TOKENS),
            "scoreRaw": self.score,
            "treasuresTotal": self.treasures_to_win,
            "taskSuccess": self.state == GameState.WON,
            "wasValidAction": was_valid,
            "state": self.state.value,
            "playerPosition": self.player_position,
            "steps": self.steps,
        }

    def step(self, token: str) -> Tuple[str, float, bool, Dict[str, Any]]:
        if self.board is None:
            return "Game has not been reset. Please call reset() first.", 0.0, False, {
                "validActions": [],
                "scoreRaw": 0,
                "treasuresTotal": self.treasures_to_win,
                "taskSuccess": False,
                "wasValidAction": False,
                "state": self.state.value,
                "playerPosition": None,
                "steps": 0,
            }

        if self.is_over:
            return "Game is already over. Please reset.", 0.0, True, self._info(False)

        action = self.parse_token(token)
        if action is None:
            return "", 0.0, False, self._info(False)

        if action == QUIT_TOKEN:
            self.state = GameState.QUIT
            return "", 0.0, True, self._info(True)

        new_row, new_col = self.candidate_position(Direction(action))
        if self.board.is_blocked(new_row, new_col):
            return "", 0.0, False, self._info(False)

        messages = []
        reward = 0.0
        if self.board.get(new_row, new_col) == TREASURE:
            self.collected_treasures.append(TREASURE_LABEL)
            messages.append(PICKUP_MESSAGE)
            reward = 1.0

        old_row, old_col = self.player_position
        self.board.set(old_row, old_col, EMPTY)
        self.board.set(new_row, new_col, PLAYER)
        self.player_position = (new_row, new_col)
        self.player_path.append(self.player_position)
        self.steps += 1

        if self.score >= self.treasures_to_win:
            self.state = GameState.WON
            messages.append(WIN_MESSAGE)

        return "\n".join(messages), reward, self.is_over, self._info(True)

    def summary(self) -> str:
        return f"Game Over. Treasures collected: {self.score}"
