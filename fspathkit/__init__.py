"""Lexical path decomposition, file status queries and small filesystem tools."""

__version__ = "0.1.0"