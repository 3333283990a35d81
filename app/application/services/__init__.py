"""Application services shared across use cases."""

from app.application.services.data_service import RECENT_LIMIT, DataService

__all__ = ["DataService", "RECENT_LIMIT"]
