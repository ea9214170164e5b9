"""Agents bouncing around a square arena, spreading a disease on contact."""

__version__ = "0.1.0"
