from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Current UTC time without tzinfo.

    Timestamp columns are stored naive (SQLite has no time zone type and the
    Postgres columns are TIMESTAMP WITHOUT TIME ZONE); everything is UTC.
    """
    return datetime.now(UTC).replace(tzinfo=None)


class TimestampedModel(SQLModel):
    """created_at/updated_at columns. updated_at is bumped by the service layer."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
