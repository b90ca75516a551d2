"""Collect the melons, dodge the enemies: a small pygame arcade game."""

__version__ = "0.1.0"