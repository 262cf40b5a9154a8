"""Concurrent prime factorization with configurable worker pools and a command."""

__version__ = "0.1.0"
__all__ = ["fact", "app"]