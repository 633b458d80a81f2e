"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
configuration, initialisation du schema, sessions et repository.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.persistence.database import get_engine, init_db
from .infrastructure.persistence.repositories import SQLModelVideoRepository


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree le schema une fois
        repo = container.video_repository()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique du schema
    database = providers.Resource(
        init_db,
        reset=config.provided.reset_schema_on_startup,
    )

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: Session(get_engine()))

    # Repository - Factory pour nouvelle instance avec session fraiche
    video_repository = providers.Factory(
        SQLModelVideoRepository,
        session=session,
    )
