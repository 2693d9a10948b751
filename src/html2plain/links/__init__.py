"""Hyperlink rendering and the numbered link reference table."""

from .collector import LinkCollector, LinkTable

__all__ = ["LinkCollector", "LinkTable"]
