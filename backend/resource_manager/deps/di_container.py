"""
Dependency injection container using dependency-injector.
Wires the session-independent services and controllers.
"""

from typing import Optional

from dependency_injector import containers, providers

from resource_manager.services.health_service import HealthService
from resource_manager.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Services
    health_service = providers.Singleton(
        HealthService,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        from resource_manager.core.config import settings

        _container = Container()
        _container.config.from_dict({
            "database_url": settings.DATABASE_URL,
            "version": settings.VERSION,
        })
    return _container
