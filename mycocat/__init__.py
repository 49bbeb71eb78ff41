"""Mushroom and mycelium company catalog browser."""

__version__ = "0.1.0"
