"""Wanderlust Tours -- travel agency API backed by an in-memory store."""

__version__ = "1.0.0"
