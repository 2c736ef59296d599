"""Headless résumé client with JSON-Schema driven code sample forms."""

__version__ = "0.1.0"
