"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant le contrat de persistance de
l'agregat Video. L'implementation (adaptateur) fournit le mecanisme de
stockage concret (SQLite via SQLModel, en memoire pour les tests, etc.).

Le contrat exige que l'agregat soit relu dans la meme forme qu'a
l'enregistrement : emplacements de visuels et de medias distincts,
listes d'associations dans l'ordre d'insertion avec leurs doublons.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from videocatalog.core.entities.video import Video


class IVideoRepository(ABC):
    """
    Interface de stockage des videos.

    Une video est enregistree et relue en une seule unite de travail,
    identifiee par son id. La session (unite de travail) est fournie par
    l'appelant a l'adaptateur, qui ne la valide (commit) jamais lui-meme.
    """

    @abstractmethod
    def get_by_id(self, video_id: UUID) -> Optional[Video]:
        """Recupere une video par son ID, None si inexistante."""
        ...

    @abstractmethod
    def save(self, video: Video) -> Video:
        """Sauvegarde une video (insertion ou remplacement complet)."""
        ...

    @abstractmethod
    def delete(self, video_id: UUID) -> bool:
        """Supprime une video par ID. Retourne True si supprimee."""
        ...
