
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import declarative_base, declared_attr, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    @declared_attr
    def created_at(cls):
        return mapped_column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    @declared_attr
    def updated_at(cls):
        return mapped_column(
            DateTime(timezone=True),
            default=utcnow,
            onupdate=utcnow,
            nullable=False,
        )


Base = declarative_base()

from .role import RoleEnum
from .application_status import ApplicationStatus

from .user import User
from .vacancy import Vacancy
from .application import Application

__all__ = [
    "Base",
    "TimestampMixin",
    "RoleEnum",
    "ApplicationStatus",
    "User",
    "Vacancy",
    "Application",
]
