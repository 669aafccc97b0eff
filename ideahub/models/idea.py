"""Idea and idea audit-log models."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ideahub.database import Base


class Idea(Base):
    """Innovation idea. Drafts are owned by their submitter."""

    __tablename__ = "ideas"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    idea_reference_code: Mapped[str | None] = mapped_column(String(32), nullable=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(40), nullable=False, default="innovation")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    submitter_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("profiles.id"), nullable=False
    )
    assigned_evaluator_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    is_draft: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    language: Mapped[str | None] = mapped_column(String(5), nullable=True)
    average_evaluation_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    priority_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    prototype_images_urls: Mapped[list | None] = mapped_column(JSON, nullable=True)
    feasibility_study_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    pricing_offer_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class IdeaActionLog(Base):
    """Idea audit trail - append-only."""

    __tablename__ = "idea_action_log"

    action_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    idea_id: Mapped[str] = mapped_column(String(36), ForeignKey("ideas.id"), nullable=False)
    action_type: Mapped[str] = mapped_column(String(50), nullable=False)
    action_detail: Mapped[str | None] = mapped_column(Text, nullable=True)
    performed_by: Mapped[str] = mapped_column(String(36), nullable=False)
    user_role: Mapped[str] = mapped_column(String(20), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
