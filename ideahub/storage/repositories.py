"""Repository functions for ideas, evaluations, profiles and lookups."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.models import (
    Evaluation,
    EvaluatorAssignment,
    Idea,
    IdeaActionLog,
    ListOfValue,
    Profile,
    Translation,
)
from ideahub.schemas.evaluation import ComprehensiveScores, EvaluationProgress

EVALUATION_TYPES = ("technology", "finance", "commercial")


def _now() -> datetime:
    return datetime.now(timezone.utc)


# Profiles

async def get_profile(db: AsyncSession, user_id: str) -> Profile | None:
    """Get profile by user id."""
    result = await db.execute(select(Profile).where(Profile.id == user_id))
    return result.scalar_one_or_none()


async def get_user_role(db: AsyncSession, user_id: str) -> str | None:
    """Role of a user, or None when the user has no profile."""
    result = await db.execute(select(Profile.role).where(Profile.id == user_id))
    return result.scalar_one_or_none()


async def update_profile_picture(
    db: AsyncSession, profile: Profile, picture_url: str | None
) -> Profile:
    """Set or clear the profile picture URL."""
    profile.profile_picture_url = picture_url
    profile.updated_at = _now()
    await db.flush()
    return profile


# Ideas

async def list_drafts(db: AsyncSession, user_id: str) -> list[Idea]:
    """Active drafts owned by a user, most recently updated first."""
    result = await db.execute(
        select(Idea)
        .where(
            Idea.submitter_id == user_id,
            Idea.is_draft.is_(True),
            Idea.is_active.is_(True),
        )
        .order_by(Idea.updated_at.desc())
    )
    return list(result.scalars().all())


async def get_idea(db: AsyncSession, idea_id: str) -> Idea | None:
    """Get idea by ID."""
    result = await db.execute(select(Idea).where(Idea.id == idea_id))
    return result.scalar_one_or_none()


async def mark_idea_submitted(db: AsyncSession, idea: Idea) -> Idea:
    """Move a draft into the review queue."""
    now = _now()
    idea.status = "submitted"
    idea.is_draft = False
    idea.submitted_at = now
    idea.updated_at = now
    await db.flush()
    return idea


async def soft_delete_idea(db: AsyncSession, idea: Idea) -> Idea:
    """Hide an idea; the row stays for audit."""
    idea.is_active = False
    idea.updated_at = _now()
    await db.flush()
    return idea


async def list_searchable_ideas(db: AsyncSession, profile: Profile) -> list[dict[str, Any]]:
    """
    Ideas visible to the caller, flattened with submitter details for search.

    Submitters see their own active ideas; evaluators and management see
    every active idea that has left draft.
    """
    query = (
        select(Idea, Profile.full_name, Profile.email, Profile.department)
        .join(Profile, Profile.id == Idea.submitter_id)
        .where(Idea.is_active.is_(True))
        .order_by(Idea.created_at.desc())
    )
    if profile.role == "submitter":
        query = query.where(Idea.submitter_id == profile.id)
    else:
        query = query.where(Idea.is_draft.is_(False))

    result = await db.execute(query)
    rows = []
    for idea, full_name, email, department in result.all():
        row = {column.key: getattr(idea, column.key) for column in Idea.__table__.columns}
        row.update(full_name=full_name, email=email, department=department)
        rows.append(row)
    return rows


async def generate_idea_reference_code(db: AsyncSession, now: datetime | None = None) -> str:
    """Next reference code for the year, e.g. IDEA-2026-0042."""
    now = now or _now()
    prefix = f"IDEA-{now.year}-"
    result = await db.execute(
        select(func.count()).select_from(Idea).where(Idea.idea_reference_code.like(f"{prefix}%"))
    )
    return f"{prefix}{result.scalar_one() + 1:04d}"


# Audit

async def log_idea_action(
    db: AsyncSession,
    idea_id: str,
    action_type: str,
    performed_by: str,
    user_role: str,
    action_detail: str | None = None,
) -> IdeaActionLog:
    """Append an idea audit record."""
    entry = IdeaActionLog(
        action_id=str(uuid4()),
        idea_id=idea_id,
        action_type=action_type,
        action_detail=action_detail,
        performed_by=performed_by,
        user_role=user_role,
        timestamp=_now(),
    )
    db.add(entry)
    await db.flush()
    return entry


async def list_idea_actions(db: AsyncSession, idea_id: str) -> list[IdeaActionLog]:
    """Audit trail of one idea, oldest first."""
    result = await db.execute(
        select(IdeaActionLog)
        .where(IdeaActionLog.idea_id == idea_id)
        .order_by(IdeaActionLog.timestamp)
    )
    return list(result.scalars().all())


# Evaluations

async def get_evaluation_rows(db: AsyncSession, idea_id: str) -> list[dict[str, Any]]:
    """
    One row per active assignment of an idea, with the evaluator's name and
    the matching evaluation's columns (all None while nothing was submitted).
    """
    result = await db.execute(
        select(EvaluatorAssignment, Evaluation, Profile.full_name)
        .outerjoin(
            Evaluation,
            and_(
                Evaluation.idea_id == EvaluatorAssignment.idea_id,
                Evaluation.evaluator_id == EvaluatorAssignment.evaluator_id,
                Evaluation.evaluation_type == EvaluatorAssignment.evaluation_type,
            ),
        )
        .outerjoin(Profile, Profile.id == EvaluatorAssignment.evaluator_id)
        .where(
            EvaluatorAssignment.idea_id == idea_id,
            EvaluatorAssignment.is_active.is_(True),
        )
        .order_by(EvaluatorAssignment.assigned_at)
    )
    rows = []
    for assignment, evaluation, full_name in result.all():
        row = {
            column.key: getattr(evaluation, column.key) if evaluation else None
            for column in Evaluation.__table__.columns
        }
        row.update(
            idea_id=assignment.idea_id,
            evaluator_id=assignment.evaluator_id,
            evaluation_type=assignment.evaluation_type,
            evaluator_name=full_name,
        )
        rows.append(row)
    return rows


async def get_evaluation_progress(db: AsyncSession, idea_id: str) -> EvaluationProgress:
    """
    Completion of active assignments for an idea.

    An assignment is complete once its evaluator has scored the idea for the
    assigned type. Missing types are the standard evaluation types without a
    completed evaluation.
    """
    result = await db.execute(
        select(EvaluatorAssignment, Evaluation.overall_score)
        .outerjoin(
            Evaluation,
            and_(
                Evaluation.idea_id == EvaluatorAssignment.idea_id,
                Evaluation.evaluator_id == EvaluatorAssignment.evaluator_id,
                Evaluation.evaluation_type == EvaluatorAssignment.evaluation_type,
            ),
        )
        .where(
            EvaluatorAssignment.idea_id == idea_id,
            EvaluatorAssignment.is_active.is_(True),
        )
    )
    rows = result.all()
    total_assigned = len(rows)
    completed_types = {a.evaluation_type for a, score in rows if score is not None}
    total_completed = sum(1 for _, score in rows if score is not None)
    return EvaluationProgress(
        total_assigned=total_assigned,
        total_completed=total_completed,
        progress_percentage=round(total_completed / total_assigned * 100) if total_assigned else 0,
        missing_types=[t for t in EVALUATION_TYPES if t not in completed_types],
    )


async def calculate_average_evaluation_score(db: AsyncSession, idea_id: str) -> float:
    """Mean overall score of an idea's scored evaluations (0 when none)."""
    result = await db.execute(
        select(func.avg(Evaluation.overall_score)).where(
            Evaluation.idea_id == idea_id,
            Evaluation.overall_score.is_not(None),
        )
    )
    return float(result.scalar_one_or_none() or 0)


async def calculate_comprehensive_evaluation_score(
    db: AsyncSession, idea_id: str
) -> ComprehensiveScores:
    """Average overall score per evaluation type plus overall/enrichment rollups."""
    result = await db.execute(
        select(Evaluation.evaluation_type, func.avg(Evaluation.overall_score))
        .where(
            Evaluation.idea_id == idea_id,
            Evaluation.overall_score.is_not(None),
        )
        .group_by(Evaluation.evaluation_type)
    )
    per_type = {row[0]: float(row[1] or 0) for row in result.all()}

    totals = await db.execute(
        select(func.avg(Evaluation.overall_score), func.avg(Evaluation.enrichment_score)).where(
            Evaluation.idea_id == idea_id,
            Evaluation.overall_score.is_not(None),
        )
    )
    overall_average, enrichment_average = totals.one()
    return ComprehensiveScores(
        technology_score=per_type.get("technology", 0.0),
        finance_score=per_type.get("finance", 0.0),
        commercial_score=per_type.get("commercial", 0.0),
        overall_average=float(overall_average or 0),
        enrichment_average=float(enrichment_average or 0),
    )


# Lookups

async def list_translations(db: AsyncSession) -> list[Translation]:
    result = await db.execute(select(Translation))
    return list(result.scalars().all())


async def list_values(db: AsyncSession, list_key: str) -> list[ListOfValue]:
    """Active options of a named list, ordered by English label."""
    result = await db.execute(
        select(ListOfValue)
        .where(ListOfValue.list_key == list_key, ListOfValue.is_active.is_(True))
        .order_by(ListOfValue.value_en)
    )
    return list(result.scalars().all())
