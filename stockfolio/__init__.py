"""Stockfolio -- personal investment portfolio tracker."""

__version__ = "0.1.0"
