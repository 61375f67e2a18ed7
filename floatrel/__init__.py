"""Propagate release assets to floating major/minor releases."""

__version__ = "0.1.0"
