import unittest

from treasure_grid.board import PLAYER, EMPTY, TREASURE
from treasure_grid.game import (
    TreasureGame, Direction, GameState, PICKUP_MESSAGE, WIN_MESSAGE, TREASURE_LABEL,
)

WINNING_MOVES = "DDSSDDSSA"


class GameTests(unittest.TestCase):
    def setUp(self):
        self.game = TreasureGame()
        self.game.reset()

    def play(self, moves):
        results = []
        for token in moves:
            results.append(self.game.step(token))
        return results

    def test_reset_state(self):
        self.assertEqual(self.game.state, GameState.PLAYING)
        self.assertEqual(self.game.player_position, (0, 0))
        self.assertEqual(self.game.collected_treasures, [])
        self.assertEqual(self.game.player_path, [(0, 0)])

    def test_direction_deltas(self):
        self.assertEqual(Direction.UP.delta, (-1, 0))
        self.assertEqual(Direction.DOWN.delta, (1, 0))
        self.assertEqual(Direction.LEFT.delta, (0, -1))
        self.assertEqual(Direction.RIGHT.delta, (0, 1))

    def test_step_before_reset(self):
        game = TreasureGame()
        message, reward, done, info = game.step("D")
        self.assertIn("reset", message)
        self.assertFalse(done)
        self.assertFalse(info["wasValidAction"])

    def test_out_of_bounds_move_is_rejected(self):
        before = self.game.render()
        for token in "WA":
            message, reward, done, info = self.game.step(token)
            self.assertEqual(message, "")
            self.assertFalse(done)
            self.assertFalse(info["wasValidAction"])
        self.assertEqual(self.game.player_position, (0, 0))
        self.assertEqual(self.game.render(), before)

    def test_obstacle_move_is_rejected(self):
        self.game.step("S")
        self.assertEqual(self.game.player_position, (1, 0))
        before = self.game.render()
        message, reward, done, info = self.game.step("D")
        self.assertFalse(info["wasValidAction"])
        self.assertEqual(self.game.player_position, (1, 0))
        self.assertEqual(self.game.render(), before)

    def test_unknown_tokens_are_ignored(self):
        before = self.game.render()
        for token in ["x", "", " ", "1", "WD", None]:
            message, reward, done, info = self.game.step(token)
            self.assertEqual(message, "")
            self.assertFalse(done)
        self.assertEqual(self.game.render(), before)
        self.assertEqual(self.game.steps, 0)

    def test_tokens_are_case_insensitive(self):
        self.game.step("d")
        self.assertEqual(self.game.player_position, (0, 1))
        self.game.step("a")
        self.assertEqual(self.game.player_position, (0, 0))

    def test_collect_treasure(self):
        results = self.play("DD")
        message, reward, done, info = results[-1]
        self.assertEqual(message, PICKUP_MESSAGE)
        self.assertEqual(reward, 1.0)
        self.assertFalse(done)
        self.assertEqual(self.game.collected_treasures, [TREASURE_LABEL])
        self.assertEqual(info["scoreRaw"], 1)
        self.assertEqual(self.game.board.get(0, 2), PLAYER)
        self.assertEqual(self.game.board.get(0, 0), EMPTY)

    def test_treasure_is_not_collectible_twice(self):
        self.play("DDAD")
        self.assertEqual(len(self.game.collected_treasures), 1)
        self.game.step("A")
        self.assertEqual(self.game.board.get(0, 2), EMPTY)
        self.assertEqual(self.game.board.count(TREASURE), 2)

    def test_single_player_marker_after_moves(self):
        for token in "SDSWDDSSAAWWDDSS":
            self.game.step(token)
            self.assertEqual(self.game.board.count(PLAYER), 1)
            self.assertEqual(self.game.board.player_position(), self.game.player_position)

    def test_quit(self):
        message, reward, done, info = self.game.step("q")
        self.assertTrue(done)
        self.assertEqual(self.game.state, GameState.QUIT)
        self.assertEqual(self.game.summary(), "Game Over. Treasures collected: 0")

    def test_win(self):
        results = self.play(WINNING_MOVES)
        for message, reward, done, info in results[:-1]:
            self.assertFalse(done)
        message, reward, done, info = results[-1]
        self.assertTrue(done)
        self.assertTrue(info["taskSuccess"])
        self.assertIn(PICKUP_MESSAGE, message)
        self.assertIn(WIN_MESSAGE, message)
        self.assertEqual(self.game.state, GameState.WON)
        self.assertEqual(self.game.score, 3)
        self.assertEqual(self.game.summary(), "Game Over. Treasures collected: 3")

    def test_step_after_game_over(self):
        self.game.step("Q")
        message, reward, done, info = self.game.step("D")
        self.assertEqual(message, "Game is already over. Please reset.")
        self.assertTrue(done)
        self.assertEqual(self.game.player_position, (0, 0))
        self.assertEqual(info["validActions"], [])

    def test_player_path_tracks_accepted_moves(self):
        self.play("WSDX")
        self.assertEqual(self.game.player_path, [(0, 0), (1, 0)])
        self.assertEqual(self.game.steps, 1)

    def test_reset_restores_board(self):
        self.play("DD")
        self.game.reset()
        self.assertEqual(self.game.board.count(TREASURE), 3)
        self.assertEqual(self.game.score, 0)
        self.assertEqual(self.game.state, GameState.PLAYING)


if __name__ == '__main__':
    unittest.main()
