"""Shared text, validation and formatting helpers."""
