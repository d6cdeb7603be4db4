"""matchfeed - REST API for matches and their commentary."""

__version__ = "1.0.0"
