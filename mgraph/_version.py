"""Version information for mgraph."""

__version__ = "0.1.0"
