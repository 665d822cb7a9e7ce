from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ListingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hash: str
    title: str
    company: str
    location: str
    platform: str
    url: str
    posted_at: datetime
    seniority: Optional[str] = None
    tech_stack: Optional[list[str]] = None
    employment_type: Optional[str] = None
    created_at: datetime
