"""Lead model - summary of a newly created project, sent to the operator."""

from datetime import datetime

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from src.portfolio.models.base import utc_now


class Lead(SQLModel, table=True):
    """Notification payload for a project creation.

    Built for every new project but only written to the leads table when
    settings.persist_leads is on; by default it lives only as long as the
    email send.
    """

    __tablename__ = "leads"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: str = Field(default="", sa_type=Text)
    slug: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=utc_now)
