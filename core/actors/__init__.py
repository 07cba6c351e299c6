"""
Actor-related modules for Hex Quest.

This package holds the player and goal records moved around the board by
the movement controller and the session.
"""

from core.actors.base import Actor, Goal
