# src/fetcher/model.py (Fetch Layer)
from datetime import datetime, timezone

from pydantic import BaseModel, Field


class FetchedPage(BaseModel):
    """Markup of one successfully fetched page plus how long the fetch took."""
    url: str
    text: str
    load_time_ms: float
    status: int = 200
    content_type: str = ""
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
