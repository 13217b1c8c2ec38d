"""dok - Docker CLI toolkit."""

__version__ = "0.1.0"
