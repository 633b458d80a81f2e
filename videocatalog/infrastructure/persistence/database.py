"""
Configuration de la base de donnees pour VideoCatalog.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut) cree a la demande
- Session factory et unite de travail (session_scope) avec liberation garantie
- Creation du schema a partir des modeles, avec reinitialisation optionnelle

Le schema est entierement derive des declarations SQLModel : aucune
migration n'est conservee. La base est configuree via VIDEOCATALOG_DATABASE_URL
(defaut: sqlite:///videocatalog.db).
"""

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """
    Retourne l'engine, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from videocatalog.config import Settings
        settings = Settings()

        # Creer le repertoire parent si l'URL est un fichier SQLite
        db_url = settings.database_url
        if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
            db_path = Path(db_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

        connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
        _engine = create_engine(db_url, echo=False, connect_args=connect_args)
        logger.debug("Engine cree", url=db_url)
    return _engine


def reset_engine() -> None:
    """Libere l'engine global ; le prochain get_engine() relit la configuration."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())
        try:
            # operations
        finally:
            session.close()

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine()) as session:
        yield session


@contextmanager
def session_scope(engine: Optional[Engine] = None) -> Iterator[Session]:
    """
    Unite de travail transactionnelle.

    Valide (commit) a la sortie normale du bloc, annule (rollback) et relance
    l'exception sinon. La session est fermee dans tous les cas.

    Utilisation :
        with session_scope() as session:
            SQLModelVideoRepository(session).save(video)

    Args:
        engine: Engine a utiliser (defaut: get_engine())
    """
    session = Session(engine or get_engine())
    try:
        yield session
        session.commit()
    except Exception:
        logger.debug("Rollback de l'unite de travail")
        session.rollback()
        raise
    finally:
        session.close()


def init_db(reset: bool = False, engine: Optional[Engine] = None) -> None:
    """
    Cree toutes les tables declarees par les modeles.

    Args:
        reset: Supprime toutes les tables avant de les recreer
        engine: Engine a utiliser (defaut: get_engine())
    """
    # Import des modeles pour enregistrer leurs metadonnees
    # L'import est fait ici pour eviter les imports circulaires
    from videocatalog.infrastructure.persistence import models  # noqa: F401

    target = engine or get_engine()
    if reset:
        logger.info("Suppression du schema existant")
        SQLModel.metadata.drop_all(target)
    SQLModel.metadata.create_all(target)
    logger.debug("Schema cree", tables=sorted(SQLModel.metadata.tables))
