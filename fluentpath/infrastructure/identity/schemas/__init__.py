"""Pydantic schemas for the identity API."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserDetailsResponse(BaseModel):
    """Schema for the authenticated learner's profile."""

    id: int
    email: str | None
    first_name: str | None
    last_name: str | None
    display_name: str
    profile_image_url: str | None
    current_level: str = Field(..., description="beginner, intermediate or advanced")
    total_points: int = Field(..., ge=0)
    current_streak: int = Field(..., ge=0)
    last_activity_date: datetime | None
    created_at: datetime | None
