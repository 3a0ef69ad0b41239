"""Pydantic schemas for learning modules."""

from datetime import datetime

from pydantic import BaseModel, Field


class ModuleResponse(BaseModel):
    """Schema for a module merged with the learner's progress."""

    id: int
    title: str
    description: str | None
    level: str
    content: str
    order: int
    completed: bool = Field(..., description="Whether the learner completed the module")
    score: float | None = Field(None, ge=0, le=10)


class ModulesListResponse(BaseModel):
    modules: list[ModuleResponse]


class ModuleProgressUpdateRequest(BaseModel):
    """Schema for replacing the learner's progress on a module."""

    completed: bool = Field(..., description="Whether the module is completed")
    score: float | None = Field(None, ge=0, le=10, description="Optional score out of 10")


class ModuleProgressResponse(BaseModel):
    module_id: int
    completed: bool
    score: float | None
    completed_at: datetime | None
