"""Item Pydantic schemas for request/response validation."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemCreateRequest(BaseModel):
    """Request to create a new item."""
    name: str = Field(min_length=1)
    description: Optional[str] = None


class ItemResponse(BaseModel):
    """Single item response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
