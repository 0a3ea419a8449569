"""Exception classes for itest-harness."""

from itest_harness.utils.constants import ErrorCode, ERROR_MESSAGES


class HarnessError(Exception):
    """Base exception class for itest-harness."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict | None = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert the exception to a dictionary format.

        Returns:
            A dictionary representation of the error.
        """
        return {
            "status": "error",
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details
            }
        }


class UnknownProfileError(HarnessError):
    """Profile has no known default port and none was given."""

    def __init__(self, profile: str):
        super().__init__(
            code=ErrorCode.UNKNOWN_PROFILE,
            message=f"No default port known for profile '{profile}'",
            details={"profile": profile}
        )


class InvalidPortError(HarnessError, ValueError):
    """Port number is not numeric or out of range."""

    def __init__(self, port_number: str, reason: str = "not a number"):
        super().__init__(
            code=ErrorCode.INVALID_PORT,
            message=f"Invalid port number {port_number!r}: {reason}",
            details={"port_number": port_number}
        )


class LoggingConfigError(HarnessError):
    """Logging configuration error."""

    def __init__(self, message: str):
        super().__init__(
            code=ErrorCode.LOGGING_CONFIG_FAILED,
            message=message
        )


class InvalidSettingsError(HarnessError):
    """Harness settings failed validation."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(
            code=ErrorCode.INVALID_SETTINGS,
            message=message,
            details={"errors": errors or []}
        )
