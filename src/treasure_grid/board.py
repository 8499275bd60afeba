"""Board layout and cell helpers for the Treasure Grid game."""

from typing import List, Optional, Tuple

ROWS = 5
COLS = 5
TREASURES_TO_WIN = 3

PLAYER = "P"
EMPTY = "."
OBSTACLE = "#"
TREASURE = "T"

CELL_MARKERS = (PLAYER, EMPTY, OBSTACLE, TREASURE)

INITIAL_LAYOUT = (
    "P.T..",
    ".#.#.",
    "....T",
    "#.#..",
    "...T.",
)


def is_valid_move(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


class Board:
    def __init__(self, layout: Tuple[str, ...] = INITIAL_LAYOUT):
        """
        Args:
            layout: one string per row, one marker per cell
        """
        if len(layout) != ROWS:
            raise ValueError(f"layout must have {ROWS} rows, got {len(layout)}")

        self.grid: List[List[str]] = []
        for row_idx, row in enumerate(layout):
            if len(row) != COLS:
                raise ValueError(f"row {row_idx} must have {COLS} cells, got {len(row)}")
            for marker in row:
                if marker not in CELL_MARKERS:
                    raise ValueError(f"unknown cell marker {marker!r} in row {row_idx}")
            self.grid.append(list(row))

        players = self.find(PLAYER)
        if len(players) != 1:
            raise ValueError(f"layout must contain exactly one player, got {len(players)}")

    def get(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def set(self, row: int, col: int, marker: str):
        self.grid[row][col] = marker

    def find(self, marker: str) -> List[Tuple[int, int]]:
        return [
            (row, col)
            for row in range(ROWS)
            for col in range(COLS)
            if self.grid[row][col] == marker
        ]

    def count(self, marker: str) -> int:
        return len(self.find(marker))

    def player_position(self) -> Optional[Tuple[int, int]]:
        players = self.find(PLAYER)
        return players[0] if players else None

    def is_blocked(self, row: int, col: int) -> bool:
        return not is_valid_move(row, col) or self.grid[row][col] == OBSTACLE

    def render(self) -> str:
        return "\n".join(" ".join(row) for row in self.grid)
