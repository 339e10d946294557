from typing import Any, Dict

from fastapi import status


class BaseHTTPException(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, status_code: int | None = None, extra: Dict[str, Any] | None = None):
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra or {}


class MissingFieldsError(BaseHTTPException):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("Missing required fields")


class UpstreamResponseError(BaseHTTPException):
    def __init__(self, call: str):
        super().__init__(f"Invalid response from OpenRouter ({call} call)")
        self.call = call


class AIOutputParseError(BaseHTTPException):
    def __init__(self, message: str, ai_output: Any):
        super().__init__(f"AI output parse error: {message}", extra={"aiOutput": ai_output})
        self.ai_output = ai_output


class InternalServerError(BaseHTTPException):
    pass
