#!/usr/bin/env python3
"""
Matching Service - FastAPI Application

HTTP API over the matching engine with automatic API documentation.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException

from core.config_loader import get_config
from core.exceptions import ServiceException
from .exceptions import (
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import matches_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Matching Service API",
        description="Match service professionals to job requests",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(matches_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "matching"}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Matching Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
