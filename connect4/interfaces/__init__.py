"""
connect4.interfaces - User interfaces for Connect Four

This package contains the terminal session and the board renderer.
"""

# Don't import anything here to avoid circular imports
__all__ = []
