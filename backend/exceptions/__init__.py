from typing import Optional, Dict, Any

ANALYSIS_FAILURE_MESSAGE = "Failed to analyze news. Please check your API key and try again."


class VeriFactException(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationException(VeriFactException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Validation failed for {field}: {reason}",
            {"field": field, "reason": reason}
        )


class ServiceException(VeriFactException):
    pass


class AnalysisFailure(ServiceException):
    """The single user-facing error raised when a claim could not be analyzed."""

    def __init__(self, reason: str):
        super().__init__(
            ANALYSIS_FAILURE_MESSAGE,
            {"reason": reason}
        )

    @property
    def reason(self) -> str:
        return self.details.get("reason", "")


class PersistenceException(VeriFactException):
    def __init__(self, key: str, operation: str, reason: str):
        super().__init__(
            f"Storage {operation} failed for {key}: {reason}",
            {"key": key, "operation": operation, "reason": reason}
        )
