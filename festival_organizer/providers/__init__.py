"""Concrete implementations of the festival organizer interfaces."""
