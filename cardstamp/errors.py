from __future__ import annotations


class CardstampError(Exception):
    """Base class for option normalization failures."""


class StructuralError(CardstampError, RuntimeError):
    """A required value is missing or a required filesystem entry is absent."""


class DomainError(CardstampError, ValueError):
    """A supplied value is well-formed but outside its allowed domain."""
