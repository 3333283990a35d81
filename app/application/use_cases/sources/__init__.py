"""Source-point collection use cases."""

from app.application.use_cases.sources.source_collection_operations import (
    SourceCollectionService,
)

__all__ = ["SourceCollectionService"]
