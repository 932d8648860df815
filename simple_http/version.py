"""Version information for simple-http-utilities."""

__version__ = "0.2.0"
