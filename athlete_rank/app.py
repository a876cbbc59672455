"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from athlete_rank.config import Config
from athlete_rank.datasources import DataSource, DataSourceHandle, DocumentApiDataSource
from athlete_rank.errors import DataSourceError
from athlete_rank.api import router

logger = logging.getLogger(__name__)


def create_app(
    config: Config | None = None,
    datasource_factory: Optional[Callable[[], DataSource]] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Args:
        config: Application configuration. If None, loads from environment.
        datasource_factory: Builds the data source on first use. If None,
            a DocumentApiDataSource is built from the configuration.
        
    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()
    
    if datasource_factory is None:
        def datasource_factory() -> DataSource:
            return DocumentApiDataSource(
                api_url=config.document_api_url,
                api_key=config.document_api_key,
                data_source=config.document_data_source,
                database=config.document_database,
            )
    
    handle = DataSourceHandle(datasource_factory)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        # Startup
        logger.info("Starting Athlete Rank API")
        logger.info(f"Using document API: {config.document_api_url} ({config.document_database})")
        logger.info(f"Default leaderboard view: {config.default_leaderboard_view}")
        
        yield
        
        # Shutdown
        logger.info("Shutting down...")
        await handle.close()
    
    app = FastAPI(
        title="Athlete Rank API",
        description="Score aggregation, leaderboards and athlete summaries",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.datasource_handle = handle
    
    # Include API routes
    app.include_router(router)
    
    @app.exception_handler(DataSourceError)
    async def datasource_error_handler(request: Request, exc: DataSourceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=502, content={"detail": "Document store unavailable"})
    
    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}
    
    return app
