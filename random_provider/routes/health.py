"""
Root endpoint for the random context provider.

Describes the service, the type tags it understands and where its
endpoints are mounted.
"""

from fastapi import APIRouter, Request

from random_provider.domain.value_type import ValueType
from random_provider.schemas import ServerInfoResponse

# Create router
router = APIRouter(tags=["health"])


@router.get("/", response_model=ServerInfoResponse)
async def root(request: Request):
    """Root endpoint with server information."""
    settings = request.app.state.settings
    prefix = settings.API_PREFIX.rstrip("/")
    return ServerInfoResponse(
        name=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Context provider responding to NGSI v1 queries with random data",
        value_types=[t.value for t in ValueType if t is not ValueType.UNKNOWN],
        endpoints={
            "health": f"GET {prefix}/random/health",
            "query_context": f"POST {prefix}/random/{{type}}/queryContext",
        },
    )
