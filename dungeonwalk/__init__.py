"""A small third-person dungeon walker: rooms, an animated player, a follow camera and a title menu."""

__version__ = "0.1.0"