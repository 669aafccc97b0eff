"""Idea request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class IdeaOut(BaseModel):
    """Idea snapshot returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    idea_reference_code: str | None = None
    title: str
    description: str
    category: str
    status: str
    submitter_id: str
    is_draft: bool
    is_active: bool
    average_evaluation_score: float | None = None
    priority_score: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    submitted_at: datetime | None = None


class DraftListResponse(BaseModel):
    """GET /v1/drafts response."""

    drafts: list[IdeaOut] = Field(default_factory=list)
    count: int


class DraftActionResponse(BaseModel):
    """Result of submitting or discarding a draft."""

    idea: IdeaOut
    action: str
    audit_logged: bool
