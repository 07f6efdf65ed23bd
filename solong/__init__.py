"""A tile-based 2D game: map parsing and validation, game state, and a pygame window."""

__version__ = "1.0.0"
__all__ = ["mapfile", "game", "app"]