"""Falling-block puzzle game engine and statistics utilities."""

__version__ = "0.1.0"