from typing import TYPE_CHECKING
from ...infrastructure.db.sql_connection import get_engine, get_session_factory

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the session factory"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the engine and session factory in the container.
        This is the ONLY place where database connections are registered;
        repositories receive the session factory from here.
        """
        container.register_singleton("engine", get_engine())
        container.register_singleton("session_factory", get_session_factory())
