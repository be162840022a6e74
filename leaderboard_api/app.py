"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from leaderboard_api import __version__
from leaderboard_api.config import Config
from leaderboard_api.datasources import CsvFileSource
from leaderboard_api.api import router
from leaderboard_api.api.dependencies import set_config, set_datasource

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Args:
        config: Application configuration. If None, loads from environment.
        
    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()
    
    datasource = CsvFileSource(path=config.csv_path)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        logger.info("Starting Arcade Leaderboard API")
        logger.info(f"Reading leaderboard from: {config.csv_path}")
        
        set_config(config)
        set_datasource(datasource)
        
        yield
        
        logger.info("Shutting down...")
        await datasource.close()
    
    app = FastAPI(
        title="Arcade Leaderboard API",
        description="Ranked leaderboard built from a course-completion CSV export",
        version=__version__,
        lifespan=lifespan,
    )
    
    app.include_router(router)
    
    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}
    
    return app
