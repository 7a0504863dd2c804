"""
Main script to play Othello in the terminal or run random playouts.
"""
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.logger import setup_logging

def main():
    """Start a console game, or run simulations when --simulate is given."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                      help='Path to config file')
    parser.add_argument('--simulate', type=int, default=None, metavar='N',
                      help='Play N random games and print a summary')
    parser.add_argument('--log-level', type=str, default=None,
                      help='Override the configured log level')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.log_level:
        config.logging.log_level = args.log_level
    setup_logging(config)

    if args.simulate is not None:
        from othello.simulate import run_simulations

        config.simulation.num_games = args.simulate
        results = run_simulations(config)

        print("\n=== Simulation ===")
        print(f"Games: {results['games']}")
        print(f"Black wins: {results['black_wins']}  White wins: {results['white_wins']}  Draws: {results['draws']}")
        print(f"Average moves: {results['avg_moves']:.1f}")
        print(f"Moves per second: {results['moves_per_sec']:.1f}")
        print("==================")
        return

    from othello.ui import OthelloUI

    print("Enter moves as 'x y' (column row), 'reset' or 'quit'.")
    try:
        OthelloUI(config).run()
    except KeyboardInterrupt:
        print("\nQuitting game...")

if __name__ == "__main__":
    main()
