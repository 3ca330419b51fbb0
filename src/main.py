"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.router import api_router
from src.config import settings
from src.formatting import get_formatter

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Build the display formatter from settings

    Shutdown:
    - Release app state
    """
    logger.info(f"Starting {settings.app_name}...")

    app.state.formatter = get_formatter()
    logger.info(
        f"Formatter initialized (currency={settings.currency_code}, "
        f"env={settings.app_env})"
    )

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    del app.state.formatter


app = FastAPI(
    title=settings.app_name,
    description="Timeline, risk matrix, and cost roll-ups for project plans",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
