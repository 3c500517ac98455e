"""Device Map Simulator: shared device state and its map projection."""

__version__ = "0.1.0"
