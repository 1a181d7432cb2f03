"""Application exceptions mapped to HTTP responses by the global handlers."""

from typing import Any, Dict, Optional


class CrudHubError(Exception):
    """
    Base exception for the CrudHub API.

    Providers raise subclasses of this error; the API layer turns them into
    ``{"detail": ..., "code": ...}`` responses with ``status_code``.
    """

    status_code: int = 500
    code: str = "CRUDHUB_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response dict."""
        result: Dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.details:
            result["details"] = self.details
        return result


class BadRequestError(CrudHubError):
    status_code = 400
    code = "BAD_REQUEST"


class UnauthorizedError(CrudHubError):
    status_code = 401
    code = "UNAUTHORIZED"


class ForbiddenError(CrudHubError):
    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(CrudHubError):
    """Raised when a requested resource doesn't exist (or is soft-deleted)."""

    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        details = {"id": str(resource_id)} if resource_id is not None else None
        super().__init__(message, details=details)


class ConflictError(CrudHubError):
    status_code = 409
    code = "CONFLICT"
