"""Memora: tag and year based retrieval of media posts."""

__version__ = "0.1.0"
