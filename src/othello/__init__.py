"""
Othello rules engine with a console front end.
"""
from .game import Board, OthelloGame, Score
from .config import Config, get_default_config

__version__ = "0.1"

__all__ = ['Board', 'OthelloGame', 'Score', 'Config', 'get_default_config']
