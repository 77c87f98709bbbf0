"""TRI Sikkim accessibility preferences — display preference engine."""

__version__ = "0.1.0"
