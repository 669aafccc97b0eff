"""Evaluation summary schemas."""

from typing import Literal

from pydantic import BaseModel, Field

EvaluationStatus = Literal["completed", "pending"]


class AverageScores(BaseModel):
    """Per-criterion averages over completed evaluations."""

    overall: float
    feasibility: float
    impact: float
    innovation: float
    enrichment: float


class EvaluationEntry(BaseModel):
    """One evaluator's contribution as shown in the summary."""

    type: str
    evaluator: str = "Unknown"
    status: EvaluationStatus
    score: float | None = None
    feedback: str | None = None
    recommendation: str | None = None


class EvaluationSummary(BaseModel):
    """Aggregate over all evaluations of one idea."""

    total: int = Field(ge=0)
    completed: int = Field(ge=0)
    progress: int = 0
    avg_scores: AverageScores | None = None
    evaluations: list[EvaluationEntry] = Field(default_factory=list)


class RecommendationDisplay(BaseModel):
    """Icon/label/colour for a recommendation category."""

    icon: str
    label: str
    color: str


class ConsensusEntry(BaseModel):
    """Share of evaluators giving one recommendation."""

    recommendation: str
    count: int
    percentage: float
    display: RecommendationDisplay


class ConsensusReport(BaseModel):
    """Recommendation tally for one idea."""

    consensus: dict[str, int] = Field(default_factory=dict)
    total_recommendations: int = 0
    entries: list[ConsensusEntry] = Field(default_factory=list)


class EvaluationCard(BaseModel):
    """Presentation row for an individual evaluation."""

    type: str
    type_icon: str
    evaluator: str
    status: EvaluationStatus
    score_label: str
    recommendation: RecommendationDisplay | None = None
    feedback_excerpt: str | None = None


class EvaluationSummaryResponse(BaseModel):
    """GET /v1/ideas/{idea_id}/evaluation-summary response."""

    idea_id: str
    summary: EvaluationSummary
    consensus: ConsensusReport
    cards: list[EvaluationCard] = Field(default_factory=list)
    show_scores: bool


class EvaluationProgress(BaseModel):
    """Assignment completion for one idea."""

    total_assigned: int
    total_completed: int
    progress_percentage: int
    missing_types: list[str] = Field(default_factory=list)


class ComprehensiveScores(BaseModel):
    """Average overall score per evaluation type, plus rollups."""

    technology_score: float
    finance_score: float
    commercial_score: float
    overall_average: float
    enrichment_average: float
