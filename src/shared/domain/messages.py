"""Base message interfaces shared across services."""

from dataclasses import dataclass


@dataclass
class Query:
    """Base class for all read-only queries."""
    pass
