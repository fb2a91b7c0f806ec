"""Column factories for the created/updated/deleted bookkeeping every table carries."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func


def created_at_column() -> Mapped[datetime]:
    return mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)


def updated_at_column() -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


def deleted_at_column() -> Mapped[Optional[datetime]]:
    return mapped_column(DateTime(timezone=True), nullable=True, index=True)
