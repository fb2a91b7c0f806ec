"""
Timestamp and soft-delete bookkeeping shared by every entity.

Entities compose a `Tracking` value instead of inheriting from a base class;
the free functions below work on anything exposing a `tracking` attribute.
"""

from datetime import datetime, timezone
from typing import Optional, Protocol, TypeVar

import attrs


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@attrs.frozen
class Tracking:
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def new(cls) -> 'Tracking':
        now = utc_now()
        return cls(created_at=now, updated_at=now)


class Tracked(Protocol):
    tracking: Tracking


_E = TypeVar('_E', bound=Tracked)


def is_deleted(entity: Tracked) -> bool:
    return entity.tracking.deleted_at is not None


def is_active(entity: Tracked) -> bool:
    return entity.tracking.deleted_at is None


def soft_delete(entity: _E) -> _E:
    now = utc_now()
    return attrs.evolve(  # type: ignore[misc]
        entity, tracking=attrs.evolve(entity.tracking, deleted_at=now, updated_at=now)
    )


def restore(entity: _E) -> _E:
    return attrs.evolve(  # type: ignore[misc]
        entity, tracking=attrs.evolve(entity.tracking, deleted_at=None, updated_at=utc_now())
    )


def touch(entity: _E) -> _E:
    return attrs.evolve(  # type: ignore[misc]
        entity, tracking=attrs.evolve(entity.tracking, updated_at=utc_now())
    )
