"""
Presentation layer for Othello.
"""
from .console import OthelloUI

__all__ = ['OthelloUI']
