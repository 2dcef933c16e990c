"""Task tracker: a small REST API for tasks plus a terminal client."""

__version__ = "1.0.0"
