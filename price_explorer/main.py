"""
This module creates and configures the main FastAPI application for the
Electricity Price Explorer API. It serves a data-explorer view over CSV
electricity price datasets and a load-profile cost computation.

Features:
    - Dataset listing and parsed price samples
    - Overall and per-month price statistics
    - Hourly price profiles (overall, weekday, weekend, per month)
    - Load-profile cost computation with summary totals
    - Swagger documentation at /docs
    - CORS-enabled for web applications

API Categories:
    - System Information: Health and API metadata
    - Datasets: Dataset listing and samples
    - Statistics & Analytics: Statistics and hourly profiles
    - Computations: Load profile validation and cost runs
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .controllers import explorer_controller
from .config import app_config


def configure_logging() -> None:
    """Configure root logging from the application settings."""
    logging.basicConfig(
        level=getattr(logging, app_config.logging.level.upper(), logging.INFO),
        format=app_config.logging.format
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application with CORS and all routers under /api.

    Routes:
        - /docs: Interactive Swagger UI documentation
        - /redoc: Alternative ReDoc documentation
        - /api/*: All price explorer endpoints
    """
    configure_logging()

    app = FastAPI(
        title=app_config.api.title,
        description=app_config.api.description,
        version=app_config.api.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "System Information",
                "description": "API health, version info, and system status endpoints"
            },
            {
                "name": "Datasets",
                "description": "CSV price dataset listing and parsed samples"
            },
            {
                "name": "Statistics & Analytics",
                "description": "Price statistics, monthly breakdowns and hourly profiles"
            },
            {
                "name": "Computations",
                "description": "Load profile validation and load-cost computations"
            }
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.api.allow_origins,
        allow_credentials=app_config.api.allow_credentials,
        allow_methods=app_config.api.allow_methods,
        allow_headers=app_config.api.allow_headers,
    )

    app.include_router(
        explorer_controller.router,
        prefix="/api",
    )

    logging.getLogger(__name__).info(
        f"Serving datasets from {app_config.data_dir}")

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=app_config.api.host,
        port=app_config.api.port,
        reload=app_config.api.reload
    )
