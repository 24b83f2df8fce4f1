"""Custom exceptions for the resume matcher.

Blank or nonsensical text is never an error: it produces a low score.
These exceptions cover input that is not text at all.
"""

from __future__ import annotations


class MatcherError(Exception):
    """Base exception for all matcher errors."""

    pass


class InvalidInputError(MatcherError):
    """Raised when a match argument is not a string.

    Distinct from "no matches found", which is a normal, scored outcome.
    """

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.received_type = type(value).__name__
        super().__init__(
            f"{field} must be text (str), got {self.received_type}"
        )
