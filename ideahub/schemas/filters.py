"""Search filter schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from ideahub.schemas.idea import IdeaOut

SCORE_MIN = 0.0
SCORE_MAX = 10.0


class SearchFilters(BaseModel):
    """Structured idea query. Empty sets and None mean "no constraint"."""

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    status: frozenset[str] = frozenset()
    category: frozenset[str] = frozenset()
    date_from: date | None = None
    date_to: date | None = None
    min_score: float = Field(default=SCORE_MIN, ge=SCORE_MIN, le=SCORE_MAX)
    max_score: float = Field(default=SCORE_MAX, ge=SCORE_MIN, le=SCORE_MAX)
    submitter_id: frozenset[str] = frozenset()
    evaluator_id: frozenset[str] = frozenset()
    has_attachments: bool | None = None
    is_urgent: bool | None = None


class SearchResponse(BaseModel):
    """POST /v1/search/ideas response."""

    items: list[IdeaOut] = Field(default_factory=list)
    total: int
    active_filters: int
