"""Domain exceptions.

Services raise these; routers translate them into HTTP responses.
"""

from typing import Any


class IdeaHubError(Exception):
    """Base exception for all IdeaHub errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class FetchError(IdeaHubError):
    """The data store could not serve a query or update."""

    def __init__(self, message: str = "Data store request failed", details: dict | None = None):
        super().__init__(message, code="FETCH_FAILED", details=details)


class NotFoundError(IdeaHubError):
    """Requested record does not exist or is not visible to the caller."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            f"{resource} not found",
            code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class AuthorizationError(IdeaHubError):
    """Caller is not allowed to perform this action."""

    def __init__(self, message: str = "Not authorized for this action"):
        super().__init__(message, code="FORBIDDEN")


class PictureValidationError(IdeaHubError):
    """Uploaded profile picture was rejected before reaching storage."""

    def __init__(self, reason: str, message: str, message_ar: str):
        super().__init__(message, code=reason, details={"message_ar": message_ar})
        self.reason = reason
