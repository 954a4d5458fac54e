"""
Base class for Entities.

Entities have an identity that runs through time while their other
attributes change. Two entities of the same class are equal when their
ids are equal.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed integer entity identifiers.

    Ids are immutable and compared by value. Zero is the placeholder
    for "no id" and is falsy.

    Example:
        @dataclass(frozen=True)
        class FlashcardId(EntityId):
            value: int
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def to_primitive(self) -> int:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType and should
    be declared with @dataclass(eq=False) to keep identity equality.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
