"""A tiny entity-system platformer in pygame featuring a jumping smiley face."""

__version__ = "0.1.0"