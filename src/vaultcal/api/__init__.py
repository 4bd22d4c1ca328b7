"""API route modules."""

from vaultcal.api.events import router as events_router

__all__ = ["events_router"]
