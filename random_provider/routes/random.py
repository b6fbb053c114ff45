"""
Random content provider endpoints.

Handles:
- Health check returning one random value of each supported type
- NGSI v1 queryContext, called by the context broker when a registration
  uses legacy forwarding. Values change with every request.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from random_provider.dependencies import get_random_provider_service
from random_provider.domain.services.random_provider_service import RandomProviderService
from random_provider.schemas import QueryContextRequest, QueryContextResponse, RandomHealthResponse

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/random", tags=["random"])


@router.get("/health", response_model=RandomHealthResponse)
async def health_check(service: RandomProviderService = Depends(get_random_provider_service)):
    """Return some random data values to show the provider is functioning."""
    return await service.health_check()


@router.post("/{type}/queryContext", response_model=QueryContextResponse)
async def query_context(
    type: str,
    body: Optional[QueryContextRequest] = None,
    service: RandomProviderService = Depends(get_random_provider_service),
):
    """Respond to an NGSI v1 queryContext with random values of the requested type."""
    logger.info(f"📖 queryContext for type '{type}'")
    return await service.query_context(body or QueryContextRequest(), type)
