"""Redis web console: a quote-aware command interpreter in front of Redis."""

__version__ = "0.1.0"
