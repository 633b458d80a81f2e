"""
Fixtures pytest partagees pour les tests VideoCatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Engine SQLite fichier dans tmp_path, schema cree
- Fabrique de videos
"""

from pathlib import Path
from typing import Callable, Iterator

import pytest
from sqlalchemy import Engine
from sqlmodel import Session, create_engine

from videocatalog.config import Settings
from videocatalog.core.entities import Video
from videocatalog.core.value_objects import Rating
from videocatalog.infrastructure.persistence.database import init_db


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles dans tmp_path."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine(test_settings: Settings) -> Iterator[Engine]:
    """Engine SQLite avec le schema cree."""
    engine = create_engine(
        test_settings.database_url,
        connect_args={"check_same_thread": False},
    )
    init_db(engine=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session ouverte sur l'engine de test."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def make_video() -> Callable[..., Video]:
    """
    Fabrique de videos valides.

    Les arguments nommes surchargent les valeurs par defaut.
    """

    def factory(**overrides) -> Video:
        values = {
            "title": "Inception",
            "description": "Un voleur s'infiltre dans les reves.",
            "year_launched": 2010,
            "opened": True,
            "published": False,
            "duration": 148,
            "rating": Rating.RATE12,
        }
        values.update(overrides)
        return Video(**values)

    return factory
