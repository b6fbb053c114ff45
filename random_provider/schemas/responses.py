"""
Response models for the random context provider.

This module contains the Pydantic models for the health check, the service
information endpoint and error responses.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RandomHealthResponse(BaseModel):
    """Sample values returned by the health check, one per value type."""
    model_config = ConfigDict(populate_by_name=True)

    boolean: bool = Field(..., description="Random boolean")
    number: int = Field(..., description="Random integer in [0, 43)")
    structured_value: Dict[str, Any] = Field(..., alias="structuredValue", description="Fixed structured value")
    text: str = Field(..., description="Random lorem ipsum sentence")


class ServerInfoResponse(BaseModel):
    """Response model for the root endpoint."""
    name: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    description: str = Field(..., description="Service description")
    value_types: list[str] = Field(..., description="Recognized type tags")
    endpoints: Dict[str, str] = Field(..., description="Available endpoints")


class ErrorResponse(BaseModel):
    """Response model for errors."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Optional error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")
