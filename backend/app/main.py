"""
FastAPI Main Application

Explorer API over the Codex SDK: networks, trending tokens and launchpads.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codex_sdk import configure_logging

from app.config import settings
from app.dependencies import get_sdk
from app.api.v1 import health, launchpads, networks

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown actions"""
    configure_logging(settings.LOG_LEVEL)
    configure_logging(settings.LOG_LEVEL, name="app")
    logger.info("Starting %s v%s", settings.API_TITLE, settings.API_VERSION)
    if not settings.CODEX_API_KEY:
        logger.warning("CODEX_API_KEY not set; Codex requests will fail until it is configured")
    yield
    if get_sdk.cache_info().currsize:
        get_sdk().close()
    logger.info("Shutting down %s", settings.API_TITLE)


# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(networks.router, prefix="/api/v1", tags=["Networks"])
app.include_router(launchpads.router, prefix="/api/v1", tags=["Launchpads"])
app.include_router(health.router, prefix="/api/v1", tags=["Health"])


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": settings.API_TITLE,
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION,
        "docs": "/docs",
        "health": "/api/v1/health",
        "timestamp": datetime.utcnow().isoformat()
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
