"""
Domain common module.

Contains base classes for domain modeling:
- EntityId: Immutable, value-compared identifiers
- Entity: Objects with identity and lifecycle
- Clock: Injectable time source for entity timestamps
"""

from .clock import Clock, utc_now
from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError

__all__ = [
    "Clock",
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
    "utc_now",
]
