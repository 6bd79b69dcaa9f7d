from fastapi import status
from session_risk.libs.result import Error


class ClientError(Exception):
    """Use case error the caller can fix (unknown user, bad credentials, ...)"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def as_dict(self) -> dict:
        return {"code": self.base_error.code, "message": self.base_error.message}


class ServerError(Exception):
    """Unexpected use case error. The message is logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def as_dict(self) -> dict:
        return {"code": self.base_error.code, "message": "Internal server error"}
