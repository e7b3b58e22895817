"""Author directory services."""

from services.author_directory.client import DirectoryClient
from services.author_directory.gateway import DataGateway
from services.author_directory.orchestrator import RefreshOrchestrator, RefreshResult
from services.author_directory.sentinels import NOT_FOUND, NOT_PROVIDED

# Export classes
__all__ = [
    "DirectoryClient",
    "DataGateway",
    "RefreshOrchestrator",
    "RefreshResult",
    "NOT_FOUND",
    "NOT_PROVIDED"
]
