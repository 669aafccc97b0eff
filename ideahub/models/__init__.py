"""Database models."""

from ideahub.models.profile import Profile
from ideahub.models.idea import Idea, IdeaActionLog
from ideahub.models.evaluation import Evaluation, EvaluatorAssignment
from ideahub.models.i18n import ListOfValue, Translation

__all__ = [
    "Profile",
    "Idea",
    "IdeaActionLog",
    "Evaluation",
    "EvaluatorAssignment",
    "ListOfValue",
    "Translation",
]
