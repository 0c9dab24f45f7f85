"""Gym administration: trainers, members and classes."""

__version__ = "1.0.0"
