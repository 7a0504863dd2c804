"""
Othello game module.
This package contains the core rules engine for Othello.
"""

from .board import Board
from .game import OthelloGame, Score

__all__ = ['Board', 'OthelloGame', 'Score']
