"""Core models, console and helpers."""
