"""Signal-based text messaging between processes, with small string helpers."""

__version__ = "0.1.0"