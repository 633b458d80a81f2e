"""
Module de persistance pour VideoCatalog.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy) :

- database.py : Engine, unite de travail (session_scope), creation du schema
- models.py : Modeles SQLModel representant les tables
- mapping.py : Noms de colonnes par emplacement (visuels, medias, liens)
- repositories/ : Implementation du port IVideoRepository

Usage:
    from videocatalog.infrastructure.persistence import init_db, session_scope
    from videocatalog.infrastructure.persistence import SQLModelVideoRepository

    init_db()
    with session_scope() as session:
        SQLModelVideoRepository(session).save(video)
"""

from videocatalog.infrastructure.persistence.database import (
    get_engine,
    get_session,
    init_db,
    reset_engine,
    session_scope,
)
from videocatalog.infrastructure.persistence.models import (
    VideoCastMemberModel,
    VideoCategoryModel,
    VideoGenreModel,
    VideoModel,
)
from videocatalog.infrastructure.persistence.repositories import (
    SQLModelVideoRepository,
)

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
    "reset_engine",
    "session_scope",
    "VideoModel",
    "VideoCategoryModel",
    "VideoGenreModel",
    "VideoCastMemberModel",
    "SQLModelVideoRepository",
]
