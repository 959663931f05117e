"""Concrete price source adapters."""
