"""
Tests for the Othello rules engine.
"""
import numpy as np

from othello.game import Board, OthelloGame


def make_game(black, white, player=Board.BLACK):
    """Build a game on an otherwise empty board."""
    game = OthelloGame()
    for y in range(Board.SIZE):
        for x in range(Board.SIZE):
            game.board.set(x, y, Board.EMPTY)
    for x, y in black:
        game.board.set(x, y, Board.BLACK)
    for x, y in white:
        game.board.set(x, y, Board.WHITE)
    game.stones_placed = len(black) + len(white)
    game.current_player = player
    return game


def test_initial_board():
    """Test the initial board setup."""
    game = OthelloGame()
    board = game.get_board()

    assert board.shape == (8, 8), "Board should be 8x8"
    assert board[3, 3] == Board.WHITE
    assert board[4, 4] == Board.WHITE
    assert board[3, 4] == Board.BLACK
    assert board[4, 3] == Board.BLACK
    assert np.sum(board == Board.EMPTY) == 60, "Should have 60 empty squares initially"

    assert game.get_current_player() == Board.BLACK
    assert game.get_score() == (2, 2)
    assert game.stones_placed == 4


def test_initial_valid_moves():
    game = OthelloGame()
    assert game.get_valid_moves() == [(3, 2), (2, 3), (5, 4), (4, 5)]
    assert game.has_valid_move(Board.BLACK)
    assert game.has_valid_move(Board.WHITE)


def test_occupied_cells_are_never_valid():
    game = OthelloGame()
    for x, y in [(3, 3), (4, 4), (3, 4), (4, 3)]:
        assert not game.is_valid_move(x, y, Board.BLACK)
        assert not game.is_valid_move(x, y, Board.WHITE)


def test_adjacent_without_bracket_is_invalid():
    game = OthelloGame()
    # Touches a white stone but nothing black lies beyond it
    assert not game.is_valid_move(2, 2, Board.BLACK)
    assert not game.is_valid_move(0, 0, Board.BLACK)


def test_opening_move_flips_one_stone():
    game = OthelloGame()

    assert game.place_stone(2, 3), "Should be a valid move"
    board = game.get_board()

    assert board[3, 2] == Board.BLACK, "Move should place black stone"
    assert board[3, 3] == Board.BLACK, "Should capture white stone"
    assert game.stones_placed == 5
    assert game.get_score() == (4, 1)
    assert game.get_current_player() == Board.WHITE


def test_invalid_move_leaves_state_unchanged():
    game = OthelloGame()
    before = game.get_board()

    assert not game.place_stone(0, 0)
    assert not game.place_stone(3, 3)

    assert np.array_equal(game.get_board(), before)
    assert game.get_current_player() == Board.BLACK
    assert game.stones_placed == 4


def test_get_board_returns_copy():
    game = OthelloGame()
    board = game.get_board()
    board[0, 0] = Board.BLACK
    board[3, 3] = Board.BLACK

    fresh = game.get_board()
    assert fresh[0, 0] == Board.EMPTY
    assert fresh[3, 3] == Board.WHITE


def test_read_accessors_are_idempotent():
    game = OthelloGame()
    game.place_stone(2, 3)

    first = (game.get_board(), game.get_score(), game.get_current_player(),
             game.is_game_over(), game.get_winner())
    second = (game.get_board(), game.get_score(), game.get_current_player(),
              game.is_game_over(), game.get_winner())

    assert np.array_equal(first[0], second[0])
    assert first[1:] == second[1:]


def test_flips_in_multiple_directions():
    game = make_game(
        black=[(2, 0), (4, 2)],
        white=[(2, 1), (3, 2), (3, 3)],
    )

    assert game.place_stone(2, 2)
    board = game.get_board()

    assert board[1, 2] == Board.BLACK  # north run
    assert board[2, 3] == Board.BLACK  # east run
    assert board[3, 3] == Board.WHITE  # south-east run is not closed
    assert game.get_score() == (5, 1)
    assert game.stones_placed == 6


def test_long_run_is_flipped_whole():
    game = make_game(
        black=[(0, 5), (7, 7)],
        white=[(1, 5), (2, 5), (3, 5), (4, 5)],
    )

    assert game.place_stone(5, 5)
    board = game.get_board()
    assert all(board[5, x] == Board.BLACK for x in range(6))


def test_run_ending_at_edge_does_not_flip():
    game = make_game(
        black=[(0, 0), (4, 4)],
        white=[(5, 0), (6, 0), (7, 0), (3, 3)],
    )

    # The white run east of (4, 0) reaches the edge without a black stone
    assert not game.is_valid_move(4, 0, Board.BLACK)
    assert game.is_valid_move(2, 2, Board.BLACK)


def test_forced_pass_returns_turn():
    game = make_game(
        black=[(0, 0), (0, 7)],
        white=[(1, 0), (1, 7)],
    )

    assert game.place_stone(2, 0)
    assert not game.has_valid_move(Board.WHITE)
    assert game.get_current_player() == Board.BLACK, "White must pass"
    assert not game.is_game_over()

    assert game.place_stone(2, 7)
    assert game.is_game_over()
    assert game.get_winner() == Board.BLACK
    assert game.get_score() == (6, 0)


def test_game_over_full_board():
    game = make_game(black=[], white=[])
    for y in range(Board.SIZE):
        for x in range(Board.SIZE):
            game.board.set(x, y, Board.WHITE if (x + y) % 2 == 0 else Board.BLACK)
    game.stones_placed = 64

    assert game.is_game_over()
    assert game.get_score() == (32, 32)
    assert game.get_winner() == Board.EMPTY, "Equal counts should be a draw"


def test_game_over_with_empty_cells():
    game = make_game(black=[(0, 0), (7, 7)], white=[(3, 3)])

    assert not game.has_valid_move(Board.BLACK)
    assert not game.has_valid_move(Board.WHITE)
    assert game.is_game_over()
    assert game.get_winner() == Board.BLACK


def test_winner_is_empty_while_playing():
    game = OthelloGame()
    game.place_stone(2, 3)

    assert not game.is_game_over()
    assert game.get_score().black > game.get_score().white
    assert game.get_winner() == Board.EMPTY


def test_string_representation():
    game = OthelloGame()
    text = str(game)

    assert "Current player: Black" in text
    assert "Score - Black: 2, White: 2" in text
    assert text.splitlines()[3] == ". . . W B . . ."


def test_colours_live_on_board():
    game = OthelloGame()
    assert not hasattr(game, "BLACK")
    assert game.get_current_player() == Board.BLACK
    assert {int(v) for v in np.unique(game.get_board())} == {Board.EMPTY, Board.BLACK, Board.WHITE}
