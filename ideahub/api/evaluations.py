"""Evaluation read endpoints - summary, consensus, progress, scores."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.api.i18n import LanguageDep
from ideahub.auth.middleware import ProfileDep, require_role
from ideahub.database import get_db
from ideahub.engine.aggregation import build_summary, compute_consensus, evaluation_cards
from ideahub.models import Idea, Profile
from ideahub.schemas.evaluation import (
    ComprehensiveScores,
    EvaluationProgress,
    EvaluationSummaryResponse,
)
from ideahub.storage.repositories import (
    calculate_average_evaluation_score,
    calculate_comprehensive_evaluation_score,
    get_evaluation_progress,
    get_evaluation_rows,
    get_idea,
    list_idea_actions,
)

router = APIRouter()


async def _visible_idea(db: AsyncSession, idea_id: str, profile: Profile) -> Idea:
    """Submitters only see their own ideas; reviewers see all."""
    idea = await get_idea(db, idea_id)
    if not idea or not idea.is_active:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Idea not found")
    if profile.role == "submitter" and idea.submitter_id != profile.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Idea not found")
    return idea


@router.get("/ideas/{idea_id}/evaluation-summary", response_model=EvaluationSummaryResponse)
async def get_evaluation_summary(
    idea_id: str,
    profile: ProfileDep,
    ctx: LanguageDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """
    Evaluator feedback for an idea: completion, averages, consensus and
    one card per evaluation. ``show_scores`` is false when nothing is scored.
    """
    await _visible_idea(db, idea_id, profile)
    summary = build_summary(await get_evaluation_rows(db, idea_id))
    return EvaluationSummaryResponse(
        idea_id=idea_id,
        summary=summary,
        consensus=compute_consensus(summary, ctx),
        cards=evaluation_cards(summary, ctx),
        show_scores=summary.avg_scores is not None,
    )


@router.get("/ideas/{idea_id}/evaluation-progress", response_model=EvaluationProgress)
async def get_progress(
    idea_id: str,
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Assignment completion for an idea."""
    await _visible_idea(db, idea_id, profile)
    return await get_evaluation_progress(db, idea_id)


@router.get("/ideas/{idea_id}/scores")
async def get_scores(
    idea_id: str,
    profile: ProfileDep,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Average and per-type scores."""
    await _visible_idea(db, idea_id, profile)
    comprehensive: ComprehensiveScores = await calculate_comprehensive_evaluation_score(db, idea_id)
    return {
        "idea_id": idea_id,
        "average_score": await calculate_average_evaluation_score(db, idea_id),
        "comprehensive": comprehensive.model_dump(),
    }


@router.get("/ideas/{idea_id}/actions")
async def get_actions(
    idea_id: str,
    profile: Annotated[Profile, Depends(require_role("management"))],
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Audit trail of an idea (management only)."""
    actions = await list_idea_actions(db, idea_id)
    return [
        {
            "action_id": a.action_id,
            "action_type": a.action_type,
            "action_detail": a.action_detail,
            "performed_by": a.performed_by,
            "user_role": a.user_role,
            "timestamp": a.timestamp.isoformat() if a.timestamp else None,
        }
        for a in actions
    ]
