# SPDX-License-Identifier: Apache-2.0
"""Base entity classes for the Apex domain.

Entities are objects that have identity and lifecycle. Every aggregate in
Apex uses an integer surrogate key assigned by persistence; ``0`` means the
entity has not been stored yet.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional

UNPERSISTED_ID = 0


def utc_now() -> datetime:
    """Current UTC time used for audit stamps."""
    return datetime.now(timezone.utc)


class DomainEnum(IntEnum):
    """Integer-backed enum whose outward name is PascalCase.

    Members are declared as ``NOT_REGISTERED = 0`` and rendered to callers as
    ``"NotRegistered"``, which is how persisted rows and responses spell them.
    """

    @property
    def display_name(self) -> str:
        """PascalCase name used in responses (e.g. ``NotRegistered``)."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def parse(cls, value: object):
        """Resolve a member from its integer value, member name or display name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as e:
                raise ValueError(f"Invalid {cls.__name__} value: {value}") from e
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls.parse(int(text))
            key = text.replace("-", "").replace("_", "").upper()
            for member in cls:
                if member.name.replace("_", "") == key:
                    return member
        raise ValueError(f"Invalid {cls.__name__} value: {value!r}")


class Entity:
    """Base class for all domain entities.

    Entities are distinguished by their identity rather than their
    attributes. Two entities are equal when they are of the same concrete
    type and share the same id.
    """

    def __init__(self, id: int = UNPERSISTED_ID):
        self._id = id

    @property
    def id(self) -> int:
        """Get the entity's surrogate key (0 until persisted)."""
        return self._id

    @property
    def exists_in_database(self) -> bool:
        """Whether the entity has been assigned a persisted identity."""
        return self._id > 0

    def _assign_id(self, id: int) -> None:
        """Assign the identity generated by persistence.

        Only repositories call this, once, right after storing a new entity.
        """
        if id <= 0:
            raise ValueError(f"Persisted id must be greater than zero, got {id}")
        if self.exists_in_database:
            raise ValueError(f"{type(self).__name__} already has id {self._id}")
        self._id = id

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same type and ID."""
        if other is None or type(other) is not type(self):
            return False
        return self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        """Hash based on entity type and ID."""
        return hash((type(self), self._id))


class AuditableEntity(Entity):
    """Entity that tracks creation and last update timestamps.

    ``created_at`` is fixed at construction. ``last_updated_at`` starts as
    ``None`` for new entities and is stamped by every mutation.
    """

    def __init__(
        self,
        id: int = UNPERSISTED_ID,
        created_at: Optional[datetime] = None,
        last_updated_at: Optional[datetime] = None,
    ):
        super().__init__(id)
        self._created_at = created_at or utc_now()
        self._last_updated_at = last_updated_at

    @property
    def created_at(self) -> datetime:
        """Get when the entity was created."""
        return self._created_at

    @property
    def last_updated_at(self) -> Optional[datetime]:
        """Get when the entity was last modified, if ever."""
        return self._last_updated_at

    def _touch(self) -> None:
        """Stamp the entity as modified now."""
        self._last_updated_at = utc_now()
