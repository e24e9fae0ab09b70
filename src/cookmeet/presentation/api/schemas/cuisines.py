"""Cuisine schemas for API responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from cookmeet.domain.cuisine import Cuisine


class CuisineResponse(BaseModel):
    """Response schema for a cuisine bookmark."""

    id: int
    title: str
    icon_url: Optional[str] = None
    url: str
    comment: str
    created_at: datetime
    updated_at: datetime
    user_id: int = Field(description="Owner of the cuisine")

    @classmethod
    def from_domain(cls, cuisine: Cuisine) -> "CuisineResponse":
        return cls(
            id=cuisine.id,
            title=cuisine.title,
            icon_url=cuisine.icon_url,
            url=cuisine.url,
            comment=cuisine.comment,
            created_at=cuisine.created_at,
            updated_at=cuisine.updated_at,
            user_id=cuisine.owner_id,
        )
