"""Exceptions raised by meal generation."""

from __future__ import annotations


class EmptyInputError(ValueError):
    """The material pool (or required-materials list) was empty."""


class GenerationError(Exception):
    """A generation entry point failed.

    The message always reads "Failed to generate <what>: <cause>" and the
    original exception is chained as ``__cause__``.
    """

    def __init__(self, what: str, cause: BaseException):
        super().__init__(f"Failed to generate {what}: {cause}")
        self.what = what
        self.cause = cause
