"""Repository tests for evaluation rollups and lookups."""

from datetime import datetime, timezone

import pytest

from factories import make_assignment, make_evaluation, make_idea, make_profile
from ideahub.models import Idea, ListOfValue
from ideahub.storage import repositories


@pytest.fixture
async def reviewed_idea(db_session):
    """Idea with three assignments: two scored, one still open."""
    submitter = await make_profile(db_session)
    tech = await make_profile(db_session, role="evaluator", full_name="Tech Reviewer")
    fin = await make_profile(db_session, role="evaluator", full_name="Finance Reviewer")
    com = await make_profile(db_session, role="evaluator", full_name="Commercial Reviewer")
    idea = await make_idea(db_session, submitter, status="under_review", is_draft=False)

    await make_assignment(db_session, idea, tech, "technology")
    await make_assignment(db_session, idea, fin, "finance")
    await make_assignment(db_session, idea, com, "commercial")
    await make_evaluation(
        db_session, idea, tech, "technology",
        overall_score=8, feasibility_score=7, impact_score=9, innovation_score=8,
        enrichment_score=6, recommendation="approve",
    )
    await make_evaluation(
        db_session, idea, fin, "finance",
        overall_score=6, feasibility_score=5, impact_score=7, innovation_score=6,
        enrichment_score=4, recommendation="approve_with_modifications",
    )
    return idea


async def test_evaluation_rows_one_per_active_assignment(db_session, reviewed_idea):
    rows = await repositories.get_evaluation_rows(db_session, reviewed_idea.id)
    by_type = {r["evaluation_type"]: r for r in rows}
    assert set(by_type) == {"technology", "finance", "commercial"}
    assert by_type["technology"]["evaluator_name"] == "Tech Reviewer"
    assert by_type["commercial"]["overall_score"] is None


async def test_inactive_assignment_excluded(db_session):
    submitter = await make_profile(db_session)
    evaluator = await make_profile(db_session, role="evaluator")
    idea = await make_idea(db_session, submitter, is_draft=False)
    await make_assignment(db_session, idea, evaluator, "technology", is_active=False)
    await make_evaluation(db_session, idea, evaluator, "technology", overall_score=5)

    assert await repositories.get_evaluation_rows(db_session, idea.id) == []
    progress = await repositories.get_evaluation_progress(db_session, idea.id)
    assert progress.total_assigned == 0
    assert progress.progress_percentage == 0


async def test_evaluation_progress(db_session, reviewed_idea):
    progress = await repositories.get_evaluation_progress(db_session, reviewed_idea.id)
    assert progress.total_assigned == 3
    assert progress.total_completed == 2
    assert progress.progress_percentage == 67
    assert progress.missing_types == ["commercial"]


async def test_average_and_comprehensive_scores(db_session, reviewed_idea):
    assert await repositories.calculate_average_evaluation_score(db_session, reviewed_idea.id) == 7
    scores = await repositories.calculate_comprehensive_evaluation_score(db_session, reviewed_idea.id)
    assert scores.technology_score == 8
    assert scores.finance_score == 6
    assert scores.commercial_score == 0
    assert scores.overall_average == 7
    assert scores.enrichment_average == 5


async def test_average_score_without_evaluations(db_session):
    assert await repositories.calculate_average_evaluation_score(db_session, "nothing") == 0


async def test_reference_code_sequence(db_session):
    submitter = await make_profile(db_session)
    now = datetime(2026, 6, 1, tzinfo=timezone.utc)
    assert await repositories.generate_idea_reference_code(db_session, now) == "IDEA-2026-0001"
    await make_idea(db_session, submitter, idea_reference_code="IDEA-2026-0001")
    await make_idea(db_session, submitter, idea_reference_code="IDEA-2025-0007")
    assert await repositories.generate_idea_reference_code(db_session, now) == "IDEA-2026-0002"


async def test_user_role(db_session):
    manager = await make_profile(db_session, role="management")
    assert await repositories.get_user_role(db_session, manager.id) == "management"
    assert await repositories.get_user_role(db_session, "ghost") is None


async def test_searchable_ideas_by_role(db_session):
    alice = await make_profile(db_session, department="operations")
    bob = await make_profile(db_session)
    reviewer = await make_profile(db_session, role="evaluator")
    own_draft = await make_idea(db_session, alice)
    own_sent = await make_idea(db_session, alice, status="submitted", is_draft=False, minutes=5)
    bobs = await make_idea(db_session, bob, status="submitted", is_draft=False, minutes=10)

    rows = await repositories.list_searchable_ideas(db_session, alice)
    assert {r["id"] for r in rows} == {own_draft.id, own_sent.id}
    assert rows[0]["department"] == "operations"

    rows = await repositories.list_searchable_ideas(db_session, reviewer)
    assert [r["id"] for r in rows] == [bobs.id, own_sent.id]


async def test_list_values_active_sorted(db_session):
    db_session.add_all(
        [
            ListOfValue(list_key="dept", value_key="ops", value_en="Operations", value_ar="العمليات"),
            ListOfValue(list_key="dept", value_key="fin", value_en="Finance", value_ar="المالية"),
            ListOfValue(list_key="dept", value_key="old", value_en="Archive", value_ar="الأرشيف", is_active=False),
            ListOfValue(list_key="other", value_key="x", value_en="X", value_ar="س"),
        ]
    )
    await db_session.flush()
    values = await repositories.list_values(db_session, "dept")
    assert [v.value_key for v in values] == ["fin", "ops"]


async def test_soft_delete_keeps_row(db_session):
    submitter = await make_profile(db_session)
    idea = await make_idea(db_session, submitter)
    await repositories.soft_delete_idea(db_session, idea)
    row = await db_session.get(Idea, idea.id)
    assert row is not None and row.is_active is False
