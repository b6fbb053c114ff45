"""
Middleware package for the random context provider.

Cross-cutting request handling: logging and error handling.
"""

from .error_handling import ErrorHandlingMiddleware
from .logging import LoggingMiddleware

__all__ = ["ErrorHandlingMiddleware", "LoggingMiddleware"]
