"""
Household Calendar
FastAPI Application Entry Point
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from homecal.config import settings
from homecal.database import async_engine, init_models
from homecal import models  # noqa: F401  registers tables on Base.metadata
from homecal.api import auth, events, calendar, links, search, feed

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    await init_models()
    logger.info("Database ready")
    yield
    # Shutdown
    await async_engine.dispose()


app = FastAPI(
    title="Household Calendar API",
    description="Shared household calendar, links and search",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(calendar.router, prefix="/api/calendar", tags=["Calendar"])
app.include_router(links.router, prefix="/api/links", tags=["Links"])
app.include_router(search.router, prefix="/api/search", tags=["Search"])
app.include_router(feed.router, prefix="/api", tags=["Live Feed"])


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Household Calendar API", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": settings.database_url.split(":", 1)[0],
        "default_timezone": settings.default_timezone,
    }


def main():
    import uvicorn

    uvicorn.run("homecal.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    main()
