#!/usr/bin/env python3
"""
Random Context Provider - HTTP Server

A context provider that answers a context broker with random data.

Usage:
    python -m random_provider.main

Then clients (usually the context broker) can:
- GET  /                                          - Server information
- GET  /proxy/v1/random/health                    - Random sample of each value type
- POST /proxy/v1/random/{type}/queryContext       - NGSI v1 queryContext with random values
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from random_provider.config import Settings, settings as default_settings
from random_provider.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from random_provider.routes import health_router, random_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    # Configure logging
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="Random Context Provider",
        description="Context provider responding to NGSI v1 queries with random data",
        version=settings.APP_VERSION,
    )
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added is first executed
    app.add_middleware(LoggingMiddleware, enable_detailed_logging=settings.ENABLE_DETAILED_LOGGING)
    app.add_middleware(ErrorHandlingMiddleware, enable_error_logging=settings.ENABLE_ERROR_LOGGING)

    # Mount routers
    app.include_router(health_router)
    app.include_router(random_router, prefix=settings.API_PREFIX.rstrip("/"))

    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info(f"🚀 Starting {default_settings.APP_NAME} on {default_settings.HOST}:{default_settings.PORT}")
    uvicorn.run(
        "random_provider.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.RELOAD,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
