"""Translation lookup backend over a flat key-value store."""

__version__ = "0.1.0"
