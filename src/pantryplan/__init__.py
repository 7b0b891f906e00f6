"""Pantry-driven meal suggestions and calendar meal plans."""

__version__ = "0.1.0"
