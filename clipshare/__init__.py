"""Share text and images between devices through one in-memory clipboard."""

__version__ = "0.1.0"
