"""
Tests pour le module database (unite de travail et creation du schema).
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import inspect

from videocatalog.infrastructure.persistence import database
from videocatalog.infrastructure.persistence.database import init_db, session_scope
from videocatalog.infrastructure.persistence.models import VideoModel


class TestSessionScope:
    """Tests pour session_scope()."""

    def test_commit_and_close_on_success(self):
        mock_session = MagicMock()
        with patch.object(database, "Session", return_value=mock_session):
            with session_scope(MagicMock()) as session:
                assert session is mock_session

        mock_session.commit.assert_called_once()
        mock_session.rollback.assert_not_called()
        mock_session.close.assert_called_once()

    def test_rollback_and_close_on_error(self):
        mock_session = MagicMock()
        with patch.object(database, "Session", return_value=mock_session):
            with pytest.raises(ValueError):
                with session_scope(MagicMock()):
                    raise ValueError("boom")

        mock_session.commit.assert_not_called()
        mock_session.rollback.assert_called_once()
        mock_session.close.assert_called_once()

    def test_close_when_commit_fails(self):
        mock_session = MagicMock()
        mock_session.commit.side_effect = RuntimeError("connexion perdue")
        with patch.object(database, "Session", return_value=mock_session):
            with pytest.raises(RuntimeError):
                with session_scope(MagicMock()):
                    pass

        mock_session.close.assert_called_once()


class TestInitDb:
    """Tests pour init_db()."""

    def test_reset_drops_existing_rows(self, engine, make_video):
        from videocatalog.infrastructure.persistence.repositories import (
            SQLModelVideoRepository,
        )

        video = make_video()
        with session_scope(engine) as session:
            SQLModelVideoRepository(session).save(video)

        init_db(reset=True, engine=engine)

        with session_scope(engine) as session:
            assert session.get(VideoModel, str(video.id)) is None
        assert "videos" in inspect(engine).get_table_names()

    def test_without_reset_keeps_rows(self, engine, make_video):
        from videocatalog.infrastructure.persistence.repositories import (
            SQLModelVideoRepository,
        )

        video = make_video()
        with session_scope(engine) as session:
            SQLModelVideoRepository(session).save(video)

        init_db(engine=engine)

        with session_scope(engine) as session:
            assert session.get(VideoModel, str(video.id)) is not None


class TestGetEngine:
    """Tests pour get_engine() et reset_engine()."""

    def test_engine_from_settings(self, tmp_path, monkeypatch):
        db_file = tmp_path / "sub" / "catalog.db"
        monkeypatch.setenv("VIDEOCATALOG_DATABASE_URL", f"sqlite:///{db_file}")
        database.reset_engine()
        try:
            engine = database.get_engine()
            assert engine is database.get_engine()
            assert str(engine.url).endswith("catalog.db")
            assert db_file.parent.is_dir()
        finally:
            database.reset_engine()

    def test_get_session_uses_engine(self, engine):
        with patch.object(database, "get_engine", return_value=engine):
            session = next(database.get_session())
        try:
            assert session.get_bind() is engine
        finally:
            session.close()
