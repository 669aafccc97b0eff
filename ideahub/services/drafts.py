"""Draft lifecycle - list, submit and discard a submitter's unsent ideas."""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ideahub.exceptions import AuthorizationError, FetchError, NotFoundError
from ideahub.models import Idea, Profile
from ideahub.storage import repositories

logger = logging.getLogger(__name__)


class DraftService:
    """
    Draft operations on behalf of one caller.

    The audit entry is appended after the state change inside its own
    savepoint; if it fails the failure is logged and the state change is
    kept. ``on_refresh`` runs after every successful operation.
    """

    def __init__(
        self,
        db: AsyncSession,
        actor: Profile,
        on_refresh: Callable[[], Any] | None = None,
    ):
        self.db = db
        self.actor = actor
        self.on_refresh = on_refresh

    async def list_drafts(self, user_id: str) -> list[Idea]:
        try:
            return await repositories.list_drafts(self.db, user_id)
        except SQLAlchemyError as e:
            logger.exception("Error fetching drafts for user %s", user_id)
            raise FetchError("Failed to fetch drafts", {"user_id": user_id}) from e

    async def submit(self, idea_id: str) -> tuple[Idea, bool]:
        """Send a draft for review. Returns the idea and whether the audit entry was written."""
        idea = await self._owned_idea(idea_id)
        try:
            if not idea.idea_reference_code:
                idea.idea_reference_code = await repositories.generate_idea_reference_code(self.db)
            await repositories.mark_idea_submitted(self.db, idea)
        except SQLAlchemyError as e:
            logger.exception("Error submitting draft %s", idea_id)
            raise FetchError("Failed to submit idea", {"idea_id": idea_id}) from e

        audit_logged = await self._audit(idea_id, "idea_submitted", "Idea submitted from draft")
        await self._refresh()
        return idea, audit_logged

    async def discard(self, idea_id: str) -> tuple[Idea, bool]:
        """Soft-delete a draft. Draft flag and status are left as they were."""
        idea = await self._owned_idea(idea_id)
        try:
            await repositories.soft_delete_idea(self.db, idea)
        except SQLAlchemyError as e:
            logger.exception("Error deleting draft %s", idea_id)
            raise FetchError("Failed to delete draft", {"idea_id": idea_id}) from e

        audit_logged = await self._audit(idea_id, "idea_deleted", "Draft deleted by user")
        await self._refresh()
        return idea, audit_logged

    async def _owned_idea(self, idea_id: str) -> Idea:
        try:
            idea = await repositories.get_idea(self.db, idea_id)
        except SQLAlchemyError as e:
            logger.exception("Error loading idea %s", idea_id)
            raise FetchError("Failed to load idea", {"idea_id": idea_id}) from e
        if idea is None or not idea.is_active:
            raise NotFoundError("Idea", idea_id)
        if idea.submitter_id != self.actor.id:
            raise AuthorizationError("Only the submitter can change a draft")
        return idea

    async def _audit(self, idea_id: str, action_type: str, detail: str) -> bool:
        try:
            async with self.db.begin_nested():
                await repositories.log_idea_action(
                    self.db,
                    idea_id=idea_id,
                    action_type=action_type,
                    performed_by=self.actor.id,
                    user_role=self.actor.role,
                    action_detail=detail,
                )
        except SQLAlchemyError:
            logger.warning("Audit log append failed for %s on idea %s", action_type, idea_id, exc_info=True)
            return False
        return True

    async def _refresh(self) -> None:
        if self.on_refresh is None:
            return
        result = self.on_refresh()
        if inspect.isawaitable(result):
            await result
