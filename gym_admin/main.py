"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gym_admin import __version__
from gym_admin.api import gym_classes, health, members, trainers
from gym_admin.api.errors import register_exception_handlers
from gym_admin.core.database import engine, init_db
from gym_admin.core.settings import settings
from gym_admin.web import gym_classes as gym_class_pages
from gym_admin.web import home
from gym_admin.web import members as member_pages
from gym_admin.web import trainers as trainer_pages

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting gym administration...")

    await init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down...")
    await engine.dispose()
    logger.info("Application stopped")


# Create FastAPI app
app = FastAPI(
    title=settings.app_title,
    description="Trainers, members and classes with member enrollments",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include API routers
app.include_router(health.router)
app.include_router(trainers.router)
app.include_router(members.router)
app.include_router(gym_classes.router)

# Include page routers
app.include_router(home.router)
app.include_router(trainer_pages.router)
app.include_router(member_pages.router)
app.include_router(gym_class_pages.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gym_admin.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.env == "dev",
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
