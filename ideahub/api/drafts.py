"""Draft endpoints - list, submit, discard."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.auth.middleware import ProfileDep
from ideahub.database import get_db
from ideahub.schemas.idea import DraftActionResponse, DraftListResponse, IdeaOut
from ideahub.services.drafts import DraftService

router = APIRouter()


@router.get("/drafts", response_model=DraftListResponse)
async def list_drafts(
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Caller's active drafts, most recently updated first."""
    drafts = await DraftService(db, profile).list_drafts(profile.id)
    return DraftListResponse(
        drafts=[IdeaOut.model_validate(d) for d in drafts],
        count=len(drafts),
    )


@router.post("/drafts/{idea_id}/submit", response_model=DraftActionResponse)
async def submit_draft(
    idea_id: str,
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Send a draft for review."""
    idea, audit_logged = await DraftService(db, profile).submit(idea_id)
    return DraftActionResponse(
        idea=IdeaOut.model_validate(idea),
        action="idea_submitted",
        audit_logged=audit_logged,
    )


@router.post("/drafts/{idea_id}/discard", response_model=DraftActionResponse)
async def discard_draft(
    idea_id: str,
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Soft-delete a draft."""
    idea, audit_logged = await DraftService(db, profile).discard(idea_id)
    return DraftActionResponse(
        idea=IdeaOut.model_validate(idea),
        action="idea_deleted",
        audit_logged=audit_logged,
    )
