"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.service.desk_booking.driven_adapter.repo.desk_booking_command_repo_impl import (
    DeskBookingCommandRepoImpl,
)
from src.service.desk_booking.driven_adapter.repo.desk_booking_query_repo_impl import (
    DeskBookingQueryRepoImpl,
)
from src.service.desk_booking.driven_adapter.repo.desk_command_repo_impl import (
    DeskCommandRepoImpl,
)
from src.service.desk_booking.driven_adapter.repo.desk_query_repo_impl import DeskQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware engine behind a per-operation session)
    database = providers.Singleton(Database)

    # Repositories (stateless - open one session per call)
    desk_query_repo = providers.Singleton(
        DeskQueryRepoImpl, session_factory=database.provided.session
    )
    desk_command_repo = providers.Singleton(
        DeskCommandRepoImpl, session_factory=database.provided.session
    )
    desk_booking_command_repo = providers.Singleton(
        DeskBookingCommandRepoImpl, session_factory=database.provided.session
    )
    desk_booking_query_repo = providers.Singleton(
        DeskBookingQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
