from fastapi import status


class FinanceTrackerError(Exception):
    """Base class for errors surfaced to API clients as ``{error, detail}``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str = None):
        super().__init__(detail)
        self.detail = detail

    @property
    def error(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class ValidationError(FinanceTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FinanceTrackerError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(FinanceTrackerError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(FinanceTrackerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
