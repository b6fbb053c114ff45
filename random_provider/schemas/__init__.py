"""
Schemas package for the random context provider.

Pydantic models for the NGSI v1 query context exchange and for the
provider's own health, info and error responses.
"""

from .ngsi import (
    ContextAttribute,
    ContextElement,
    ContextElementResponse,
    EntityRef,
    QueryContextRequest,
    QueryContextResponse,
    StatusCode,
)
from .responses import ErrorResponse, RandomHealthResponse, ServerInfoResponse

__all__ = [
    # NGSI v1
    "EntityRef",
    "QueryContextRequest",
    "ContextAttribute",
    "ContextElement",
    "StatusCode",
    "ContextElementResponse",
    "QueryContextResponse",
    # Provider
    "RandomHealthResponse",
    "ServerInfoResponse",
    "ErrorResponse",
]
