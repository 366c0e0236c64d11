"""
Repository Configuration and Factory

Provides factory functions returning the repository for each collection
based on the service configuration.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import PortalSettings, get_settings
from .base import DocumentRepositoryInterface

logger = logging.getLogger(__name__)


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from PortalSettings.
    """
    mongodb_uri: str
    database: str = "jobportal"
    jobs_collection: str = "jobs"
    applications_collection: str = "job_applications"

    @classmethod
    def from_settings(cls, settings: Optional[PortalSettings] = None) -> "RepositoryConfig":
        """
        Build configuration from validated settings.

        Args:
            settings: Settings instance (defaults to the cached one)

        Returns:
            RepositoryConfig instance
        """
        settings = settings or get_settings()
        return cls(
            mongodb_uri=settings.mongodb_connection_uri,
            database=settings.mongo_db_name,
            jobs_collection=settings.jobs_collection,
            applications_collection=settings.applications_collection,
        )


# Singleton repository instances
_job_repository: Optional[DocumentRepositoryInterface] = None
_application_repository: Optional[DocumentRepositoryInterface] = None


def get_job_repository() -> DocumentRepositoryInterface:
    """
    Get the jobs collection repository.

    Uses singleton pattern so every request shares one connection pool.
    """
    global _job_repository

    if _job_repository is None:
        from .atlas_repository import AtlasRepository

        config = RepositoryConfig.from_settings()
        _job_repository = AtlasRepository(
            mongodb_uri=config.mongodb_uri,
            database=config.database,
            collection=config.jobs_collection,
        )
        logger.info(f"Initialized jobs repository ({config.database}.{config.jobs_collection})")

    return _job_repository


def get_application_repository() -> DocumentRepositoryInterface:
    """
    Get the job applications collection repository.

    Uses singleton pattern so every request shares one connection pool.
    """
    global _application_repository

    if _application_repository is None:
        from .atlas_repository import AtlasRepository

        config = RepositoryConfig.from_settings()
        _application_repository = AtlasRepository(
            mongodb_uri=config.mongodb_uri,
            database=config.database,
            collection=config.applications_collection,
        )
        logger.info(
            f"Initialized applications repository "
            f"({config.database}.{config.applications_collection})"
        )

    return _application_repository


def reset_repositories() -> None:
    """
    Reset the repository singletons and close the shared client.

    Used on shutdown, in tests, or when configuration changes.
    """
    global _job_repository, _application_repository

    from .atlas_repository import AtlasRepository
    AtlasRepository.reset_connection()

    _job_repository = None
    _application_repository = None
    logger.info("Repository singletons reset")
