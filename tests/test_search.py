"""Unit tests for search matching."""

from datetime import date, datetime

from ideahub.engine.search import apply_filters, has_attachments, is_urgent
from ideahub.schemas.filters import SearchFilters

IDEAS = [
    {
        "id": "i1",
        "title": "Solar roof",
        "description": "Rooftop panels",
        "status": "submitted",
        "category": "cost_reduction",
        "submitter_id": "u1",
        "created_at": datetime(2026, 1, 10, 8, 30),
        "average_evaluation_score": 7.5,
        "priority_score": 9,
        "feasibility_study_url": "https://files/f.pdf",
    },
    {
        "id": "i2",
        "title": "Chatbot for HR",
        "description": "Answer leave questions",
        "status": "approved",
        "category": "technology",
        "submitter_id": "u2",
        "created_at": "2026-02-15T12:00:00Z",
        "average_evaluation_score": 4.0,
        "priority_score": 3,
        "idea_reference_code": "IDEA-2026-0002",
    },
    {
        "id": "i3",
        "title": "Paperless invoices",
        "description": "Scan and archive",
        "status": "under_review",
        "category": "process_improvement",
        "submitter_id": "u1",
        "created_at": datetime(2026, 3, 1, 23, 59),
        "prototype_images_urls": ["a.png"],
    },
]


def ids(rows):
    return [r["id"] for r in rows]


def test_no_filters_returns_everything_in_order():
    assert ids(apply_filters(IDEAS, SearchFilters())) == ["i1", "i2", "i3"]


def test_search_term_case_insensitive_across_fields():
    assert ids(apply_filters(IDEAS, SearchFilters(search_term="CHATBOT"))) == ["i2"]
    assert ids(apply_filters(IDEAS, SearchFilters(search_term="idea-2026"))) == ["i2"]
    assert ids(apply_filters(IDEAS, SearchFilters(search_term="   "))) == ["i1", "i2", "i3"]


def test_status_and_category_sets():
    f = SearchFilters(status=frozenset({"submitted", "approved"}))
    assert ids(apply_filters(IDEAS, f)) == ["i1", "i2"]
    f = SearchFilters(category=frozenset({"technology"}))
    assert ids(apply_filters(IDEAS, f)) == ["i2"]


def test_date_range_inclusive_by_day():
    f = SearchFilters(date_from=date(2026, 2, 15), date_to=date(2026, 3, 1))
    assert ids(apply_filters(IDEAS, f)) == ["i2", "i3"]


def test_score_range_applies_only_when_narrowed():
    f = SearchFilters(min_score=5)
    assert ids(apply_filters(IDEAS, f)) == ["i1"]
    # i3 has no score and counts as 0
    f = SearchFilters(max_score=5)
    assert ids(apply_filters(IDEAS, f)) == ["i2", "i3"]


def test_submitter_filter():
    f = SearchFilters(submitter_id=frozenset({"u1"}))
    assert ids(apply_filters(IDEAS, f)) == ["i1", "i3"]


def test_user_filters_do_not_match_row_id():
    assert apply_filters(IDEAS, SearchFilters(submitter_id=frozenset({"i2"}))) == []
    assert apply_filters(IDEAS, SearchFilters(evaluator_id=frozenset({"i1"}))) == []


def test_attachment_tri_state():
    assert ids(apply_filters(IDEAS, SearchFilters(has_attachments=True))) == ["i1", "i3"]
    assert ids(apply_filters(IDEAS, SearchFilters(has_attachments=False))) == ["i2"]


def test_urgent_tri_state():
    assert ids(apply_filters(IDEAS, SearchFilters(is_urgent=True))) == ["i1"]
    assert ids(apply_filters(IDEAS, SearchFilters(is_urgent=False))) == ["i2", "i3"]


def test_helpers():
    assert has_attachments({"attachments": [1]})
    assert not has_attachments({"attachments": []})
    assert is_urgent({"status": "urgent"})
    assert not is_urgent({"priority_score": None})
