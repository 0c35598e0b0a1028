"""Repository for Lead records (only used when lead persistence is on)."""

from src.portfolio.models import Lead
from src.portfolio.repositories.base import BaseRepository


class LeadRepository(BaseRepository[Lead]):
    model = Lead
