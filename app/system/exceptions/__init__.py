from app.system.exceptions.api_exception_handler import common_exception_handler
from app.system.exceptions.base_exception import (
    AIOutputParseError,
    BaseHTTPException,
    InternalServerError,
    MissingFieldsError,
    UpstreamResponseError
)

__all__ = [
    "AIOutputParseError",
    "BaseHTTPException",
    "InternalServerError",
    "MissingFieldsError",
    "UpstreamResponseError",
    "common_exception_handler"
]
