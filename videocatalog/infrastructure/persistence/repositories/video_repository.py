"""
Implementation SQLModel du repository Video.

Implemente l'interface IVideoRepository pour la persistance de l'agregat
Video via SQLModel. Les visuels et les medias sont embarques dans la table
videos, les listes d'associations ecrites dans leurs tables de liens
(voir mapping.py).
"""

from typing import Any, Optional
from uuid import UUID

from loguru import logger
from sqlmodel import Session, select

from videocatalog.core.entities.video import Video
from videocatalog.core.ports.repositories import IVideoRepository
from videocatalog.core.value_objects import Rating
from videocatalog.infrastructure.persistence.mapping import (
    ASSOCIATION_LINKS,
    IMAGE_SLOT_COLUMNS,
    MEDIA_SLOT_PREFIXES,
    AssociationLink,
    image_from_columns,
    image_to_columns,
    media_from_columns,
    media_to_columns,
)
from videocatalog.infrastructure.persistence.models import VideoModel


class SQLModelVideoRepository(IVideoRepository):
    """
    Repository SQLModel pour les videos.

    Implemente IVideoRepository avec conversion bidirectionnelle
    entre l'agregat Video (domaine) et VideoModel + tables de liens
    (persistance).

    Le repository ne valide jamais la transaction : il se contente de
    flush(), le commit revient a l'unite de travail de l'appelant
    (session_scope).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_columns(self, video: Video) -> dict[str, Any]:
        """
        Decompose l'agregat en valeurs de colonnes de la table videos.

        Args :
            video : L'agregat Video du domaine

        Retourne :
            Dictionnaire colonne -> valeur
        """
        values: dict[str, Any] = {
            "id": str(video.id),
            "title": video.title,
            "description": video.description,
            "year_launched": video.year_launched,
            "opened": video.opened,
            "published": video.published,
            "duration": video.duration,
            "created_at": video.created_at,
            "rating": video.rating.value,
        }
        for slot in IMAGE_SLOT_COLUMNS:
            values.update(image_to_columns(slot, getattr(video, slot)))
        for slot in MEDIA_SLOT_PREFIXES:
            values.update(media_to_columns(slot, getattr(video, slot)))
        return values

    def _to_entity(self, model: VideoModel) -> Video:
        """
        Reconstruit l'agregat depuis sa ligne et ses tables de liens.

        Args :
            model : Le modele VideoModel depuis la DB

        Retourne :
            L'agregat Video correspondant
        """
        slots: dict[str, Any] = {}
        for slot in IMAGE_SLOT_COLUMNS:
            slots[slot] = image_from_columns(slot, model)
        for slot in MEDIA_SLOT_PREFIXES:
            slots[slot] = media_from_columns(slot, model)
        for link in ASSOCIATION_LINKS:
            slots[link.attribute] = self._read_links(link, model.id)

        return Video.restore(
            id=UUID(model.id),
            title=model.title,
            description=model.description,
            year_launched=model.year_launched,
            opened=model.opened,
            published=model.published,
            duration=model.duration,
            rating=Rating(model.rating),
            created_at=model.created_at,
            **slots,
        )

    def _link_rows(self, link: AssociationLink, video_id: str) -> list[Any]:
        """Lignes de liens d'une video, dans l'ordre d'insertion."""
        statement = (
            select(link.model)
            .where(link.model.video_id == video_id)
            .order_by(link.model.position)
        )
        return list(self._session.exec(statement).all())

    def _read_links(self, link: AssociationLink, video_id: str) -> list[UUID]:
        return [
            UUID(getattr(row, link.target_column))
            for row in self._link_rows(link, video_id)
        ]

    def _delete_links(self, video_id: str) -> None:
        for link in ASSOCIATION_LINKS:
            for row in self._link_rows(link, video_id):
                self._session.delete(row)
        self._session.flush()

    def _write_links(self, video: Video) -> None:
        """Reecrit toutes les tables de liens de la video (doublons inclus)."""
        video_id = str(video.id)
        self._delete_links(video_id)
        for link in ASSOCIATION_LINKS:
            for position, target_id in enumerate(getattr(video, link.attribute)):
                self._session.add(
                    link.model(
                        video_id=video_id,
                        position=position,
                        **{link.target_column: str(target_id)},
                    )
                )

    def get_by_id(self, video_id: UUID) -> Optional[Video]:
        """Recupere une video par son ID."""
        model = self._session.get(VideoModel, str(video_id))
        if model is None:
            logger.debug(f"Video introuvable: {video_id}")
            return None
        return self._to_entity(model)

    def save(self, video: Video) -> Video:
        """Sauvegarde une video (insertion ou remplacement complet)."""
        values = self._to_columns(video)
        existing = self._session.get(VideoModel, values["id"])

        if existing:
            # Mise a jour
            for column, value in values.items():
                setattr(existing, column, value)
            self._session.add(existing)
            logger.debug(f"Mise a jour de la video {video.id}")
        else:
            # Insertion
            self._session.add(VideoModel(**values))
            logger.debug(f"Insertion de la video {video.id}")

        self._session.flush()
        self._write_links(video)
        self._session.flush()
        return video

    def delete(self, video_id: UUID) -> bool:
        """Supprime une video et ses liens. Retourne True si supprimee."""
        model = self._session.get(VideoModel, str(video_id))
        if model is None:
            return False
        self._delete_links(model.id)
        self._session.delete(model)
        self._session.flush()
        logger.debug(f"Suppression de la video {video_id}")
        return True
