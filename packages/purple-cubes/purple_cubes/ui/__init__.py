"""Pygame presentation for purple-cubes."""
