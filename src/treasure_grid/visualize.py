"""Board visualization for Treasure Grid game."""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from typing import Optional, Tuple
import os

from .board import ROWS, COLS, OBSTACLE, TREASURE
from .game import TreasureGame


def _resolve_output_path(output_path: Optional[str]) -> str:
    if output_path is None:
        return "out/board.png"
    if not os.path.isabs(output_path) and not output_path.startswith("out/"):
        return os.path.join("out", output_path)
    return output_path


def _cell_center(row: int, col: int) -> Tuple[float, float]:
    # row 0 is drawn at the top
    return col + 0.5, ROWS - row - 0.5


def visualize_board(
    game: TreasureGame,
    output_path: Optional[str] = None,
    show_player_path: bool = True,
    figsize: Tuple[int, int] = (6, 6)
) -> str:
    board = game.board
    if board is None:
        raise ValueError("Game has no board. Call reset() first.")

    output_path = _resolve_output_path(output_path)
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=figsize)
    ax.set_aspect('equal')
    ax.axis('off')

    for row in range(ROWS):
        for col in range(COLS):
            marker = board.get(row, col)
            facecolor = 'dimgrey' if marker == OBSTACLE else 'whitesmoke'
            cell = mpatches.Rectangle(
                (col, ROWS - row - 1), 1, 1,
                facecolor=facecolor,
                edgecolor='black',
                linewidth=1.5,
                zorder=1
            )
            ax.add_patch(cell)

            if marker == TREASURE:
                x, y = _cell_center(row, col)
                coin = mpatches.Circle((x, y), 0.25, color='gold', zorder=3)
                ax.add_patch(coin)
                ax.text(x, y, 'T', ha='center', va='center', fontsize=14, color='black', fontweight='bold', zorder=4)

    if show_player_path and len(game.player_path) > 1:
        xs = [_cell_center(r, c)[0] for r, c in game.player_path]
        ys = [_cell_center(r, c)[1] for r, c in game.player_path]
        ax.plot(xs, ys, '-', color='steelblue', linewidth=2.5, alpha=0.6, zorder=2)

    if game.player_position is not None:
        x, y = _cell_center(*game.player_position)
        person = mpatches.Circle((x, y), 0.3, color='darkblue', zorder=5)
        ax.add_patch(person)
        ax.text(x, y, 'P', ha='center', va='center', fontsize=14, color='white', fontweight='bold', zorder=6)

    ax.set_xlim(-0.1, COLS + 0.1)
    ax.set_ylim(-0.1, ROWS + 0.1)
    ax.set_title(
        f"Treasure Grid ({game.score}/{game.treasures_to_win} treasures)",
        fontsize=14, fontweight='bold', pad=5
    )

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output_path
