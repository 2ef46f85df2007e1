#!/usr/bin/env python3
"""
Matching Exceptions - Errors raised by the match scoring engine.

Missing or malformed profile fields are never errors; they resolve to
documented defaults. Only failures that make a score meaningless are raised.
"""


class MatchingError(Exception):
    """Base class for match scoring failures."""
    pass


class ProviderError(MatchingError):
    """Raised when the remote embedding service call fails (network, auth, quota)."""
    pass


class DimensionMismatch(MatchingError):
    """Raised when two compared vectors have different lengths."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Vector dimensions differ: {left} != {right}")
        self.left = left
        self.right = right
