"""Play the Treasure Grid game on the console."""

import os
import sys
import argparse
from typing import Optional, Dict, Any, Iterator, TextIO
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from treasure_grid import TreasureGame, GameState, visualize_board

WELCOME_BANNER = "Welcome to the Treasure Game!"
MOVE_PROMPT = "Move (W/A/S/D) or Q to quit: "
DEFAULT_CONFIG_PATH = 'config.yaml'
CONFIG_ENV_VAR = 'TREASURE_GAME_CONFIG'


@dataclass
class GameStats:
    total_turns: int = 0
    accepted_moves: int = 0
    rejected_moves: int = 0
    ignored_tokens: int = 0
    treasures_collected: int = 0
    final_state: str = GameState.PLAYING.value
    game_won: bool = False


def iter_move_tokens(stream: TextIO) -> Iterator[str]:
    """Yield one token per non-whitespace character, reading a line at a time."""
    for line in stream:
        for char in line:
            if not char.isspace():
                yield char


class GameRunner:
    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        verbose: bool = False,
        snapshot: Optional[str] = None,
        show_path: bool = True
    ):
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.verbose = verbose
        self.snapshot = snapshot
        self.show_path = show_path

    def _print(self, text: str = "", end: str = "\n"):
        print(text, end=end, file=self.output_stream)
        self.output_stream.flush()

    def run_game(self, game: Optional[TreasureGame] = None) -> GameStats:
        if game is None:
            game = TreasureGame()
        game.reset()

        stats = GameStats()
        tokens = iter_move_tokens(self.input_stream)

        self._print(WELCOME_BANNER)

        while not game.is_over:
            self._print(game.render())
            self._print(MOVE_PROMPT, end="")

            token = next(tokens, None)
            if token is None:
                # end of input counts as quitting
                self._print()
                if self.verbose:
                    self._print("Warning: input ended, quitting.")
                token = "Q"

            stats.total_turns += 1
            message, reward, done, info = game.step(token)

            if game.parse_token(token) is None:
                stats.ignored_tokens += 1
            elif game.state != GameState.QUIT:
                if info['wasValidAction']:
                    stats.accepted_moves += 1
                else:
                    stats.rejected_moves += 1

            if message:
                self._print(message)

        stats.treasures_collected = game.score
        stats.final_state = game.state.value
        stats.game_won = game.state == GameState.WON

        self._print(game.summary())

        if self.verbose:
            self._print(f"\n=== Game Summary ===")
            self._print(f"Final state: {stats.final_state}")
            self._print(f"Total turns: {stats.total_turns}")
            self._print(f"Accepted moves: {stats.accepted_moves}")
            self._print(f"Rejected moves: {stats.rejected_moves}")
            self._print(f"Ignored tokens: {stats.ignored_tokens}")
            self._print(f"Treasures: {stats.treasures_collected}/{game.treasures_to_win}")

        if self.snapshot:
            try:
                saved_path = visualize_board(game, self.snapshot, show_player_path=self.show_path)
            except (OSError, ValueError) as e:
                self._print(f"Warning: could not save board snapshot to {self.snapshot}: {e}")
            else:
                if self.verbose:
                    self._print(f"Board snapshot saved to {saved_path}")

        return stats


def load_env_file(env_path: str = '.env') -> None:
    env_file = Path(env_path)
    if env_file.exists():
        load_dotenv(env_path, override=True)
    elif env_path != '.env':
        print(f"Warning: .env file not found at {env_file.absolute()}")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    explicit = config_path is not None
    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)

    if not explicit and not Path(config_path).exists():
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        print(f"Error: Config file {config_path} not found. Exiting.", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read config file {config_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error: could not parse YAML config {config_path}: {e}", file=sys.stderr)
        sys.exit(1)

    if config is None:
        return {}
    if not isinstance(config, dict):
        print(f"Error: Config file {config_path} must contain a mapping. Exiting.", file=sys.stderr)
        sys.exit(1)
    return config


def as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description='Play the Treasure Grid game')
    parser.add_argument('--config', type=str, default=None,
                        help=f'Path to YAML config file (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH})')
    parser.add_argument('--verbose', action='store_true',
                        help='Print a game summary block at the end')
    parser.add_argument('--snapshot', type=str, default=None,
                        help='Save a PNG of the final board (relative paths are placed under out/)')

    args = parser.parse_args(argv)

    load_env_file('.env')
    config = load_config(args.config)

    verbose = args.verbose or as_bool(config.get('verbose'), False)
    snapshot = args.snapshot or config.get('snapshot')
    if snapshot is not None and not isinstance(snapshot, str):
        print(f"Error: snapshot must be a file path, got {snapshot!r}. Exiting.", file=sys.stderr)
        sys.exit(1)
    show_path = as_bool(config.get('show_path'), True)

    runner = GameRunner(verbose=verbose, snapshot=snapshot, show_path=show_path)
    runner.run_game()

    sys.exit(0)


if __name__ == '__main__':
    main()
