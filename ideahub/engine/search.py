"""Idea search - applies a SearchFilters query to fetched rows."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from ideahub.schemas.filters import SCORE_MAX, SCORE_MIN, SearchFilters

SEARCHABLE_FIELDS = (
    "title",
    "description",
    "full_name",
    "email",
    "department",
    "idea_reference_code",
    "feedback",
    "recommendation",
)

URGENT_PRIORITY_THRESHOLD = 8


def _first(item: Mapping[str, Any], *keys: str) -> Any:
    """First truthy value among keys (e.g. created_at, then submitted_at)."""
    for key in keys:
        value = item.get(key)
        if value:
            return value
    return None


def _as_date(value: Any) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _matches_term(item: Mapping[str, Any], query: str) -> bool:
    for field in SEARCHABLE_FIELDS:
        value = item.get(field)
        if value and query in str(value).lower():
            return True
    return False


def has_attachments(item: Mapping[str, Any]) -> bool:
    """Whether the idea carries any attachment, prototype image or supporting document."""
    return bool(
        item.get("attachments")
        or item.get("prototype_images_urls")
        or item.get("feasibility_study_url")
        or item.get("pricing_offer_url")
    )


def is_urgent(item: Mapping[str, Any]) -> bool:
    priority = item.get("priority_score") or 0
    return priority > URGENT_PRIORITY_THRESHOLD or item.get("status") == "urgent"


def matches(item: Mapping[str, Any], filters: SearchFilters) -> bool:
    """Check one row against every active filter dimension."""
    query = filters.search_term.strip().lower()
    if query and not _matches_term(item, query):
        return False

    if filters.status and item.get("status") not in filters.status:
        return False
    if filters.category and item.get("category") not in filters.category:
        return False

    if filters.date_from is not None or filters.date_to is not None:
        item_date = _as_date(_first(item, "created_at", "submitted_at", "timestamp"))
        if item_date is None:
            return False
        if filters.date_from is not None and item_date < filters.date_from:
            return False
        if filters.date_to is not None and item_date > filters.date_to:
            return False

    if filters.min_score > SCORE_MIN or filters.max_score < SCORE_MAX:
        score = _first(item, "average_evaluation_score", "overall_score") or 0
        if not filters.min_score <= score <= filters.max_score:
            return False

    if filters.submitter_id and item.get("submitter_id") not in filters.submitter_id:
        return False
    if filters.evaluator_id and item.get("evaluator_id") not in filters.evaluator_id:
        return False

    if filters.has_attachments is not None and has_attachments(item) != filters.has_attachments:
        return False
    if filters.is_urgent is not None and is_urgent(item) != filters.is_urgent:
        return False

    return True


def apply_filters(
    items: Iterable[Mapping[str, Any]], filters: SearchFilters
) -> list[Mapping[str, Any]]:
    """Return the rows matching ``filters``, preserving input order."""
    return [item for item in items if matches(item, filters)]
