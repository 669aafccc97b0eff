"""Evaluation aggregation - summaries and recommendation consensus for one idea."""

from collections.abc import Iterable, Mapping
from typing import Any

from ideahub.i18n.context import LanguageContext
from ideahub.schemas.evaluation import (
    AverageScores,
    ConsensusEntry,
    ConsensusReport,
    EvaluationCard,
    EvaluationEntry,
    EvaluationSummary,
    RecommendationDisplay,
)

SCORE_CRITERIA = {
    "overall": "overall_score",
    "feasibility": "feasibility_score",
    "impact": "impact_score",
    "innovation": "innovation_score",
    "enrichment": "enrichment_score",
}

FEEDBACK_EXCERPT_LENGTH = 150

RECOMMENDATIONS = {
    "approve": {
        "icon": "check-circle",
        "en": "Approve",
        "ar": "موافقة",
        "color": "green",
    },
    "approve_with_modifications": {
        "icon": "alert-circle",
        "en": "Approve with Modifications",
        "ar": "موافقة مع تعديلات",
        "color": "yellow",
    },
    "needs_more_info": {
        "icon": "trending-up",
        "en": "Needs More Information",
        "ar": "يحتاج معلومات إضافية",
        "color": "blue",
    },
    "reject": {
        "icon": "thumbs-down",
        "en": "Reject",
        "ar": "رفض",
        "color": "red",
    },
}

DEFAULT_RECOMMENDATION_ICON = "alert-circle"
DEFAULT_RECOMMENDATION_COLOR = "muted"

EVALUATION_TYPE_ICONS = {
    "technology": "🔧",
    "finance": "💰",
    "commercial": "📈",
}
DEFAULT_EVALUATION_TYPE_ICON = "📊"


def _average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def build_summary(rows: Iterable[Mapping[str, Any]]) -> EvaluationSummary:
    """
    Build an EvaluationSummary from evaluation rows.

    A row is completed once it has an overall score. Each criterion is
    averaged over the completed rows that score it; with no completed rows
    the summary carries no averages at all.
    """
    rows = list(rows)
    completed = [r for r in rows if r.get("overall_score") is not None]
    total = len(rows)

    avg_scores = None
    if completed:
        avg_scores = AverageScores(
            **{
                name: _average([r[column] for r in completed if r.get(column) is not None])
                for name, column in SCORE_CRITERIA.items()
            }
        )

    return EvaluationSummary(
        total=total,
        completed=len(completed),
        progress=round(len(completed) / total * 100) if total else 0,
        avg_scores=avg_scores,
        evaluations=[
            EvaluationEntry(
                type=r.get("evaluation_type") or "",
                evaluator=r.get("evaluator_name") or "Unknown",
                status="completed" if r.get("overall_score") is not None else "pending",
                score=r.get("overall_score"),
                feedback=r.get("feedback"),
                recommendation=r.get("recommendation"),
            )
            for r in rows
        ],
    )


def recommendation_display(recommendation: str, ctx: LanguageContext) -> RecommendationDisplay:
    """Icon/label/colour for a recommendation; unknown values get a neutral look."""
    entry = RECOMMENDATIONS.get(recommendation)
    if entry is None:
        return RecommendationDisplay(
            icon=DEFAULT_RECOMMENDATION_ICON,
            label=recommendation,
            color=DEFAULT_RECOMMENDATION_COLOR,
        )
    return RecommendationDisplay(
        icon=entry["icon"],
        label=ctx.pick(entry["en"], entry["ar"]),
        color=entry["color"],
    )


def evaluation_type_icon(evaluation_type: str) -> str:
    return EVALUATION_TYPE_ICONS.get(evaluation_type, DEFAULT_EVALUATION_TYPE_ICON)


def compute_consensus(
    summary: EvaluationSummary, ctx: LanguageContext | None = None
) -> ConsensusReport:
    """
    Tally recommendations of completed evaluations.

    Evaluations without a recommendation and pending evaluations are left
    out. Percentages use the number of recommendations as denominator and
    are only produced when that number is non-zero.
    """
    ctx = ctx or LanguageContext()
    consensus: dict[str, int] = {}
    for evaluation in summary.evaluations:
        if evaluation.status != "completed" or not evaluation.recommendation:
            continue
        consensus[evaluation.recommendation] = consensus.get(evaluation.recommendation, 0) + 1

    total_recommendations = sum(consensus.values())
    entries = []
    if total_recommendations:
        entries = [
            ConsensusEntry(
                recommendation=recommendation,
                count=count,
                percentage=round(count / total_recommendations * 100, 1),
                display=recommendation_display(recommendation, ctx),
            )
            for recommendation, count in consensus.items()
        ]

    return ConsensusReport(
        consensus=consensus,
        total_recommendations=total_recommendations,
        entries=entries,
    )


def _excerpt(feedback: str | None) -> str | None:
    if not feedback:
        return None
    if len(feedback) > FEEDBACK_EXCERPT_LENGTH:
        return f"{feedback[:FEEDBACK_EXCERPT_LENGTH]}..."
    return feedback


def _score_label(evaluation: EvaluationEntry, ctx: LanguageContext) -> str:
    if evaluation.status != "completed":
        return ctx.pick("Pending", "في الانتظار")
    if evaluation.score is None:
        return "-"
    return f"{evaluation.score:g}/10"


def evaluation_cards(summary: EvaluationSummary, ctx: LanguageContext) -> list[EvaluationCard]:
    """Presentation rows for every evaluation; pending ones show no score or feedback."""
    cards = []
    for evaluation in summary.evaluations:
        completed = evaluation.status == "completed"
        cards.append(
            EvaluationCard(
                type=evaluation.type,
                type_icon=evaluation_type_icon(evaluation.type),
                evaluator=evaluation.evaluator,
                status=evaluation.status,
                score_label=_score_label(evaluation, ctx),
                recommendation=(
                    recommendation_display(evaluation.recommendation, ctx)
                    if completed and evaluation.recommendation
                    else None
                ),
                feedback_excerpt=_excerpt(evaluation.feedback) if completed else None,
            )
        )
    return cards
