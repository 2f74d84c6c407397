"""Small interactive console games and calculators."""

__version__ = "0.1.0"