"""Idea search endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.auth.middleware import ProfileDep
from ideahub.database import get_db
from ideahub.engine.filter_state import active_filter_count
from ideahub.engine.search import apply_filters
from ideahub.schemas.filters import SearchFilters, SearchResponse
from ideahub.schemas.idea import IdeaOut
from ideahub.storage.repositories import list_searchable_ideas

router = APIRouter()


@router.post("/search/ideas", response_model=SearchResponse)
async def search_ideas(
    filters: SearchFilters,
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Apply a filter query to the ideas visible to the caller."""
    rows = await list_searchable_ideas(db, profile)
    matched = apply_filters(rows, filters)
    return SearchResponse(
        items=[IdeaOut.model_validate(row) for row in matched],
        total=len(matched),
        active_filters=active_filter_count(filters),
    )
