"""Bloggify Utils: reading time, slug and excerpt helpers for blog content."""

__version__ = "1.0.0"
