"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from vaultcal import __version__
from vaultcal.api.events import router as events_router
from vaultcal.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Log resolved configuration at startup for debugging."""
    s = get_settings()
    logger.info("VaultCal starting: vault_path=%s", s.vault_path)
    if not s.vault_path or not s.vault_path.exists():
        logger.error("VAULT PATH NOT CONFIGURED OR MISSING, events API will return 503 errors")
    yield


app = FastAPI(
    title="VaultCal",
    description="Calendar events extracted from Obsidian notes",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(events_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Return project information."""
    return {
        "name": "VaultCal",
        "version": __version__,
        "description": "Calendar events extracted from Obsidian notes",
    }


@app.get("/health")
@app.get("/api/v1/health")
async def health() -> dict[str, Any]:
    """Health check endpoint with vault status."""
    s = get_settings()

    checks: dict[str, Any] = {"status": "ok"}
    if not s.vault_path or not s.vault_path.exists():
        checks["status"] = "error"
        checks["vault"] = "not configured or missing"
    else:
        checks["vault"] = "ok"
    return checks
