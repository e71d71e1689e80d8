"""Exceptions raised by the solver toolkit."""
from __future__ import annotations


class TSPError(Exception):
    """Base class for every error the package raises on purpose."""


class InvalidInput(TSPError, ValueError):
    """Malformed or out-of-range input: empty city set, non-finite
    coordinates, bad tour permutation or invalid solver parameter."""


class ProblemTooLarge(TSPError):
    """Exhaustive search was asked to run past its city-count ceiling."""

    def __init__(self, n_cities: int, max_cities: int):
        super().__init__(
            f"brute force supports at most {max_cities} cities, got {n_cities}"
        )
        self.n_cities = n_cities
        self.max_cities = max_cities
