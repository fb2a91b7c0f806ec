"""Query filters for soft-deleted rows (rows with a non-null `deleted_at`)."""

from typing import Any, TypeVar

from sqlalchemy import Select


_S = TypeVar('_S', bound=Select[Any])


def only_active(stmt: _S, model: Any) -> _S:
    return stmt.where(model.deleted_at.is_(None))


def only_deleted(stmt: _S, model: Any) -> _S:
    return stmt.where(model.deleted_at.is_not(None))


def with_deleted(stmt: _S, model: Any) -> _S:
    return stmt
