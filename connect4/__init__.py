"""
connect4 - Two-player Connect Four in the terminal

This package provides the Connect Four rule engine (board, move
validation, win/draw detection) and a terminal session to play it.
"""

# Version number
__version__ = '0.2.0'
