"""pomelo -- bookmark directories under short aliases and jump back to them."""

__version__ = "0.1.0"
