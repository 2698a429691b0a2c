from .helpers import success_response, error_response
from .logger import Logger

__all__ = [
    "success_response",
    "error_response",
    "Logger",
]
