"""Filter state - holds the current idea query and reports every change."""

from collections.abc import Callable, Hashable
from typing import Any

from ideahub.schemas.filters import SCORE_MAX, SCORE_MIN, SearchFilters


MULTI_SELECT_FIELDS = frozenset({"status", "category", "submitter_id", "evaluator_id"})

DEFAULT_FILTERS = SearchFilters()


def _clamp_score(value: float) -> float:
    return min(max(float(value), SCORE_MIN), SCORE_MAX)


class FilterState:
    """
    Mutable holder for a SearchFilters snapshot.

    Each mutation builds a new frozen snapshot and hands it to ``on_change``
    synchronously before returning.
    """

    def __init__(
        self,
        on_change: Callable[[SearchFilters], None] | None = None,
        initial: SearchFilters | None = None,
    ):
        self._filters = initial or DEFAULT_FILTERS
        self._on_change = on_change

    @property
    def filters(self) -> SearchFilters:
        return self._filters

    def set_field(self, key: str, value: Any) -> SearchFilters:
        """Replace one filter dimension. A bare string on a multi-select key is one member."""
        if key not in SearchFilters.model_fields:
            raise KeyError(f"Unknown filter field: {key}")
        if key in MULTI_SELECT_FIELDS:
            value = frozenset({value}) if isinstance(value, str) else frozenset(value)
        return self._update({key: value})

    def toggle_member(self, key: str, value: Hashable, included: bool) -> SearchFilters:
        """Add ``value`` to a multi-select dimension when included, remove it otherwise."""
        if key not in MULTI_SELECT_FIELDS:
            raise KeyError(f"Not a multi-select filter: {key}")
        current: frozenset = getattr(self._filters, key)
        members = current | {value} if included else current - {value}
        return self._update({key: members})

    def set_score_range(self, score_range: tuple[float, float]) -> SearchFilters:
        """Set both score bounds from a slider pair, clamped to [0, 10]. Order is the caller's."""
        low, high = score_range
        return self._update({"min_score": _clamp_score(low), "max_score": _clamp_score(high)})

    def clear(self) -> SearchFilters:
        """Reset to the all-permissive default."""
        return self._replace(DEFAULT_FILTERS)

    def active_count(self) -> int:
        return active_filter_count(self._filters)

    def _update(self, changes: dict[str, Any]) -> SearchFilters:
        data = self._filters.model_dump()
        data.update(changes)
        return self._replace(SearchFilters.model_validate(data))

    def _replace(self, filters: SearchFilters) -> SearchFilters:
        self._filters = filters
        if self._on_change is not None:
            self._on_change(filters)
        return filters


def active_filter_count(filters: SearchFilters) -> int:
    """
    Count non-default filter dimensions.

    The date range is one dimension whichever bound is set; the score range
    counts only when narrowed from [0, 10].
    """
    count = 0
    if filters.search_term != "":
        count += 1
    if filters.status:
        count += 1
    if filters.category:
        count += 1
    if filters.date_from is not None or filters.date_to is not None:
        count += 1
    if filters.min_score > SCORE_MIN or filters.max_score < SCORE_MAX:
        count += 1
    if filters.submitter_id:
        count += 1
    if filters.evaluator_id:
        count += 1
    if filters.has_attachments is not None:
        count += 1
    if filters.is_urgent is not None:
        count += 1
    return count
