import random
import unittest

from game import (
    BOARD_FULL,
    COLLISION,
    BoardInfo,
    CellKind,
    GameOver,
    GameState,
    Movement,
    RenderBoard,
    RenderState,
    SnakeSeq,
    contains,
    is_reversal,
    mk_rng,
    move,
    new_game,
    next_head,
    opposite,
    turn,
)

H = CellKind.SNAKE_HEAD
S = CellKind.SNAKE
E = CellKind.EMPTY
A = CellKind.APPLE


def make_state(head, body, apple, movement, seed=1):
    return GameState(SnakeSeq(head, tuple(body)), apple, movement, mk_rng(seed))


class TestNextHead(unittest.TestCase):
    def test_given_corner_head_when_computing_next_head_then_wraps(self):
        bi = BoardInfo(4, 4)
        snake = ((1, 1), [(1, 2), (1, 3)])
        self.assertEqual(next_head(bi, make_state(*snake, (2, 2), Movement.WEST)), (1, 4))
        self.assertEqual(next_head(bi, make_state(*snake, (2, 2), Movement.SOUTH)), (2, 1))
        self.assertEqual(next_head(bi, make_state(*snake, (2, 2), Movement.NORTH)), (4, 1))


class TestMove(unittest.TestCase):
    def setUp(self):
        self.bi = BoardInfo(4, 4)
        self.snake = ((1, 1), [(1, 2), (1, 3)])

    def test_given_worked_examples_when_moving_then_expected_deltas(self):
        gs_west = make_state(*self.snake, (2, 1), Movement.WEST)
        msg, nxt = move(self.bi, gs_west)
        self.assertEqual(msg, RenderBoard((((1, 4), H), ((1, 1), S), ((1, 3), E))))
        self.assertEqual(nxt.snake, SnakeSeq((1, 4), ((1, 1), (1, 2))))
        self.assertEqual(nxt.apple, (2, 1))
        self.assertEqual(nxt.rng, gs_west.rng)

        gs_north = make_state(*self.snake, (2, 1), Movement.NORTH)
        msg, nxt = move(self.bi, gs_north)
        self.assertEqual(msg, RenderBoard((((4, 1), H), ((1, 1), S), ((1, 3), E))))

        gs_south = make_state(*self.snake, (2, 1), Movement.SOUTH)
        msg, nxt = move(self.bi, gs_south)
        self.assertIsInstance(msg, RenderBoard)
        self.assertEqual(msg.delta[:2], (((2, 1), H), ((1, 1), S)))
        self.assertEqual(msg.delta[2], (nxt.apple, A))

    def test_given_no_apple_ahead_when_moving_then_length_kept_and_tail_vacated(self):
        gs = make_state((2, 3), [(2, 4), (3, 4)], (4, 1), Movement.WEST)
        msg, nxt = move(self.bi, gs)
        self.assertEqual(len(nxt.snake), len(gs.snake))
        self.assertEqual(msg.delta, (((2, 2), H), ((2, 3), S), ((3, 4), E)))
        self.assertEqual(nxt.movement, Movement.WEST)

    def test_given_apple_ahead_when_moving_then_grows_by_one_and_apple_relocated(self):
        gs = make_state((2, 3), [(2, 4), (3, 4)], (2, 2), Movement.WEST, seed=5)
        msg, nxt = move(self.bi, gs)
        self.assertEqual(len(nxt.snake), len(gs.snake) + 1)
        self.assertEqual(nxt.snake.head, (2, 2))
        self.assertEqual(nxt.snake.body, ((2, 3), (2, 4), (3, 4)))
        self.assertFalse(contains(nxt.apple, nxt.snake))
        self.assertNotEqual(nxt.rng, gs.rng)
        self.assertEqual(msg.delta, (((2, 2), H), ((2, 3), S), (nxt.apple, A)))

    def test_given_body_ahead_when_moving_then_game_over_and_state_unchanged(self):
        gs = make_state((2, 2), [(2, 3), (3, 3), (3, 2), (3, 1)], (1, 1), Movement.SOUTH)
        msg, nxt = move(self.bi, gs)
        self.assertIsInstance(msg, GameOver)
        self.assertIs(nxt, gs)
        self.assertEqual(msg.reason, COLLISION)

    def test_given_reversal_into_neck_when_moving_then_game_over(self):
        gs = make_state(*self.snake, (3, 3), Movement.EAST)
        msg, nxt = move(self.bi, gs)
        self.assertEqual(msg, GameOver())
        self.assertIs(nxt, gs)

    def test_given_tail_ahead_when_moving_then_head_follows_tail(self):
        gs = make_state((2, 2), [(2, 3), (3, 3), (3, 2)], (1, 1), Movement.SOUTH)
        msg, nxt = move(self.bi, gs)
        self.assertIsInstance(msg, RenderBoard)
        self.assertEqual(nxt.snake, SnakeSeq((3, 2), ((2, 2), (2, 3), (3, 3))))
        # the vacated tail is now the head, so it is reported once
        self.assertEqual(msg.delta, (((3, 2), H), ((2, 2), S)))

    def test_given_head_only_snake_when_moving_then_old_head_emptied(self):
        bi = BoardInfo(3, 3)
        gs = make_state((2, 2), [], (1, 1), Movement.EAST)
        msg, nxt = move(bi, gs)
        self.assertEqual(nxt.snake, SnakeSeq((2, 3)))
        self.assertEqual(msg.delta, (((2, 3), H), ((2, 2), E)))

    def test_given_head_only_snake_on_single_row_when_moving_north_then_nothing_changes(self):
        bi = BoardInfo(1, 3)
        gs = make_state((1, 2), [], (1, 1), Movement.NORTH)
        msg, nxt = move(bi, gs)
        self.assertEqual(msg, RenderBoard(()))
        self.assertEqual(nxt.snake, gs.snake)

    def test_given_last_free_cell_eaten_when_moving_then_game_over(self):
        bi = BoardInfo(1, 3)
        gs = make_state((1, 1), [(1, 2)], (1, 3), Movement.WEST)
        msg, nxt = move(bi, gs)
        self.assertIsInstance(msg, GameOver)
        self.assertEqual(msg.reason, BOARD_FULL)
        self.assertIs(nxt, gs)


class TestTurn(unittest.TestCase):
    def test_given_heading_change_when_turning_then_only_movement_replaced(self):
        gs = make_state((1, 1), [(1, 2)], (3, 3), Movement.WEST)
        gs2 = turn(gs, Movement.NORTH)
        self.assertEqual(gs2.movement, Movement.NORTH)
        self.assertEqual(gs2.snake, gs.snake)
        self.assertEqual(gs2.rng, gs.rng)
        self.assertEqual(gs.movement, Movement.WEST)
        self.assertIs(turn(gs, Movement.WEST), gs)

    def test_given_opposite_heading_when_turning_then_accepted_but_flagged(self):
        gs = make_state((1, 1), [(1, 2)], (3, 3), Movement.WEST)
        self.assertTrue(is_reversal(gs, Movement.EAST))
        self.assertFalse(is_reversal(gs, Movement.NORTH))
        self.assertEqual(turn(gs, Movement.EAST).movement, Movement.EAST)
        # a head-only snake has no neck to reverse into
        self.assertFalse(is_reversal(make_state((1, 1), [], (3, 3), Movement.WEST), Movement.EAST))


class TestDeltaAgainstFullBoard(unittest.TestCase):
    def _play(self, bi, seed, ticks):
        chooser = random.Random(seed)
        gs = new_game(bi, seed)
        for _ in range(ticks):
            options = [m for m in Movement if m != opposite(gs.movement)]
            gs = turn(gs, chooser.choice(options))
            before = RenderState.from_game_state(bi, gs)
            msg, nxt = move(bi, gs)
            if isinstance(msg, GameOver):
                self.assertIs(nxt, gs)
                return
            after = RenderState.from_game_state(bi, nxt)
            changed = before.diff(after)
            cells = [p for p, _ in msg.delta]
            self.assertEqual(len(cells), len(set(cells)))
            self.assertEqual(dict(msg.delta), changed)
            before.apply(msg)
            self.assertEqual(before.cells, after.cells)
            self.assertFalse(contains(nxt.apple, nxt.snake))
            self.assertTrue(len(nxt.snake) - len(gs.snake) in (0, 1))
            gs = nxt

    def test_given_random_games_when_ticking_then_delta_is_exactly_the_changed_cells(self):
        for seed in range(30):
            self._play(BoardInfo(5, 5), seed, 200)

    def test_given_tiny_board_random_games_when_ticking_then_delta_is_exactly_the_changed_cells(self):
        for seed in range(30):
            self._play(BoardInfo(3, 4), seed, 100)


if __name__ == '__main__':
    unittest.main(verbosity=2)
