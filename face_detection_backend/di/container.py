# Local application imports
from .base_container import BaseContainer
from .providers import (
    AlertProvider,
    AuthProvider,
    CameraProvider,
    DatabaseProvider,
    NotificationProvider,
    RepositoryProvider,
    SystemProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database session factory (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Shared services (NotificationProvider) - WebSocket manager, worker client
    4. Use cases (Auth, Camera, Alert, System) - depend on repositories and services
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        NotificationProvider.register(self)

        AuthProvider.register(self)
        CameraProvider.register(self)
        AlertProvider.register(self)
        SystemProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next ``get_container`` rebuilds it"""
    global _container
    _container = None
