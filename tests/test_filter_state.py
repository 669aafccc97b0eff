"""Unit tests for filter state."""

from datetime import date

import pytest
from pydantic import ValidationError

from ideahub.engine.filter_state import DEFAULT_FILTERS, FilterState, active_filter_count
from ideahub.schemas.filters import SearchFilters


def test_default_is_all_permissive():
    """Default filters constrain nothing."""
    state = FilterState()
    f = state.filters
    assert f.search_term == ""
    assert f.status == frozenset()
    assert f.min_score == 0 and f.max_score == 10
    assert f.date_from is None and f.date_to is None
    assert f.has_attachments is None and f.is_urgent is None
    assert state.active_count() == 0


def test_every_mutation_notifies_with_snapshot():
    """Observer receives the full snapshot after each change."""
    seen = []
    state = FilterState(on_change=seen.append)
    state.set_field("search_term", "solar")
    state.toggle_member("status", "submitted", True)
    state.set_score_range((2, 8))
    state.clear()
    assert len(seen) == 4
    assert seen[0].search_term == "solar"
    assert seen[1].status == {"submitted"}
    assert (seen[2].min_score, seen[2].max_score) == (2, 8)
    assert seen[3] == DEFAULT_FILTERS


def test_snapshot_is_immutable():
    """Snapshots handed out cannot be mutated in place."""
    state = FilterState()
    snapshot = state.toggle_member("category", "innovation", True)
    with pytest.raises(ValidationError):
        snapshot.search_term = "changed"
    state.toggle_member("category", "technology", True)
    assert snapshot.category == {"innovation"}


def test_toggle_on_then_off_restores_set():
    """Toggling the same value on and off is a no-op."""
    state = FilterState()
    state.toggle_member("status", "approved", True)
    before = state.filters.status
    state.toggle_member("status", "rejected", True)
    state.toggle_member("status", "rejected", False)
    assert state.filters.status == before


def test_toggle_keeps_values_unique():
    state = FilterState()
    state.toggle_member("submitter_id", "u1", True)
    state.toggle_member("submitter_id", "u1", True)
    assert state.filters.submitter_id == {"u1"}


def test_toggle_rejects_scalar_fields():
    with pytest.raises(KeyError):
        FilterState().toggle_member("search_term", "x", True)


def test_set_field_wraps_single_string_member():
    state = FilterState()
    assert state.set_field("status", "approved").status == {"approved"}
    assert state.set_field("category", ["technology", "cost_reduction"]).category == {
        "technology",
        "cost_reduction",
    }


def test_set_field_unknown_key():
    with pytest.raises(KeyError):
        FilterState().set_field("priority", 3)


def test_set_field_validates_score_bounds():
    with pytest.raises(ValidationError):
        FilterState().set_field("min_score", 11)


def test_score_range_clamped():
    """Slider values outside [0, 10] are clamped."""
    state = FilterState()
    f = state.set_score_range((-3, 14))
    assert (f.min_score, f.max_score) == (0, 10)


def test_score_range_ordered_pair_stays_ordered():
    state = FilterState()
    for pair in [(0, 0), (1.5, 9), (4, 4), (0, 10)]:
        f = state.set_score_range(pair)
        assert f.min_score <= f.max_score


def test_score_range_unordered_pair_not_corrected():
    """The caller's pair is authoritative; no reordering."""
    f = FilterState().set_score_range((7, 3))
    assert (f.min_score, f.max_score) == (7, 3)


def test_date_range_counts_once():
    state = FilterState()
    state.set_field("date_from", date(2026, 1, 1))
    assert state.active_count() == 1
    state.set_field("date_to", date(2026, 2, 1))
    assert state.active_count() == 1


def test_score_range_counts_only_when_narrowed():
    state = FilterState()
    state.set_score_range((0, 10))
    assert state.active_count() == 0
    state.set_score_range((0, 9.5))
    assert state.active_count() == 1


def test_tri_state_false_is_active():
    """False is a constraint; only None means unset."""
    state = FilterState()
    state.set_field("has_attachments", False)
    assert state.filters.has_attachments is False
    assert state.active_count() == 1


def test_active_count_all_dimensions_then_clear():
    state = FilterState()
    state.set_field("search_term", "cost")
    state.toggle_member("status", "submitted", True)
    state.toggle_member("category", "innovation", True)
    state.set_field("date_to", date(2026, 5, 1))
    state.set_score_range((3, 10))
    state.toggle_member("submitter_id", "u1", True)
    state.toggle_member("evaluator_id", "u2", True)
    state.set_field("has_attachments", True)
    state.set_field("is_urgent", False)
    assert state.active_count() == 9

    cleared = state.clear()
    assert cleared == SearchFilters()
    assert state.active_count() == 0


def test_active_count_zero_only_for_default():
    assert active_filter_count(SearchFilters()) == 0
    assert active_filter_count(SearchFilters(search_term=" ")) == 1
    assert active_filter_count(SearchFilters(evaluator_id=frozenset({"e"}))) == 1
