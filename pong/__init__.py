"""A walled Pong arena with computer-controlled paddles, drawn with pygame."""

__version__ = "0.1.0"