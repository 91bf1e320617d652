"""
fourinarow.interfaces - User interfaces for Four-in-a-Row

This package contains the renderers and the two ways to play: the terminal
CLI and the Flask browser page.
"""

# Don't import anything here to avoid circular imports
__all__ = []
