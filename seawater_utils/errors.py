# seawater_utils/errors.py
from __future__ import annotations


class SeawaterInputError(Exception):
    """Base class for malformed (SA, CT, p) inputs."""


class ArgumentCountError(SeawaterInputError, TypeError):
    """
    Raised when a GSW-style wrapper is not given exactly SA, CT and p.

    Example message:
        internal_energy_CT: requires three inputs (got 2)
    """


class DimensionMismatchError(SeawaterInputError, ValueError):
    """
    Raised when SA and CT differ in shape, or when p cannot be broadcast
    onto SA's [M,N] grid.

    Example message:
        internal_energy_CT: SA and CT must have same dimensions
          SA : (2, 3)
          CT : (3, 2)
    """
