"""In-memory TODO task API."""

__version__ = "1.0.0"
