"""
Random playouts for exercising the rules engine.
"""
import time
import logging
from typing import Any, Dict, NamedTuple, Optional
import numpy as np
from tqdm import tqdm

from .config import Config, get_default_config
from .game import Board, OthelloGame, Score

logger = logging.getLogger(__name__)


class GameResult(NamedTuple):
    """Outcome of a single playout."""
    winner: int
    score: Score
    num_moves: int


def play_random_game(rng: np.random.Generator) -> GameResult:
    """
    Play uniformly random legal moves until the game is over.

    Args:
        rng: Random generator used to pick moves

    Returns:
        GameResult with the winner (Board.EMPTY for a draw), final score and
        number of stones placed
    """
    game = OthelloGame()
    num_moves = 0

    while not game.is_game_over():
        valid_moves = game.get_valid_moves()
        x, y = valid_moves[rng.integers(len(valid_moves))]
        game.place_stone(x, y)
        num_moves += 1

    return GameResult(game.get_winner(), game.get_score(), num_moves)


def run_simulations(config: Optional[Config] = None) -> Dict[str, Any]:
    """
    Play a batch of random games.

    Args:
        config: Configuration object (default: get_default_config())

    Returns:
        Summary dictionary with win counts, average game length and throughput
    """
    config = config or get_default_config()
    sim = config.simulation
    rng = np.random.default_rng(sim.seed)

    results = {
        'games': 0,
        'black_wins': 0,
        'white_wins': 0,
        'draws': 0,
        'total_moves': 0,
    }

    start_time = time.time()
    for _ in tqdm(range(sim.num_games), desc="Simulating", disable=not sim.show_progress):
        result = play_random_game(rng)
        results['games'] += 1
        results['total_moves'] += result.num_moves

        if result.winner == Board.BLACK:
            results['black_wins'] += 1
        elif result.winner == Board.WHITE:
            results['white_wins'] += 1
        else:
            results['draws'] += 1

    elapsed = time.time() - start_time
    results['elapsed'] = elapsed
    results['avg_moves'] = results['total_moves'] / results['games'] if results['games'] else 0.0
    results['moves_per_sec'] = results['total_moves'] / elapsed if elapsed > 0 else float('inf')

    logger.info("Played %d games in %.2fs (%.1f moves/s)",
                results['games'], elapsed, results['moves_per_sec'])
    return results
