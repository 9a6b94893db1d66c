"""Helpers shared across ghpulls packages."""
