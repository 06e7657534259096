from .error_registry import ErrorDescriptor, describe
from .http_response import (
    api_response,
    error_response,
    result_response,
    success_response,
)
from .logger import get_logger

__all__ = [
    "ErrorDescriptor",
    "api_response",
    "describe",
    "error_response",
    "get_logger",
    "result_response",
    "success_response",
]
