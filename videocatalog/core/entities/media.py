"""
Entite Media et sa machine a etats d'encodage.

Un Media suit le cycle de vie d'un fichier physique (media principal ou
bande-annonce d'une video) a travers l'encodage. Le domaine ne fait que
tenir le statut : l'encodage lui-meme est realise par un systeme externe.

Transitions :
    (creation) -> PENDING
    send_to_encode() : tout statut -> PROCESSING
    mark_encoded(path) : tout statut -> COMPLETED
"""

from typing import Optional
from uuid import UUID, uuid4

from videocatalog.core.value_objects import MediaStatus


class Media:
    """
    Fichier media d'une video suivi a travers l'encodage.

    N'existe qu'au travers de la Video proprietaire, qui le remplace en bloc
    a chaque update_media/update_trailer.

    Attributs (lecture seule) :
        id : Identifiant unique genere a la creation
        file_path : Chemin du fichier source (immuable)
        encoded_path : Chemin du fichier encode, None tant que non encode
        status : Statut d'encodage courant
    """

    def __init__(self, file_path: str) -> None:
        self._id: UUID = uuid4()
        self._file_path = file_path
        self._encoded_path: Optional[str] = None
        self._status = MediaStatus.PENDING

    @classmethod
    def restore(
        cls,
        id: UUID,
        file_path: str,
        encoded_path: Optional[str],
        status: MediaStatus,
    ) -> "Media":
        """Reconstruit un Media persiste sans regenerer son identite."""
        media = cls.__new__(cls)
        media._id = id
        media._file_path = file_path
        media._encoded_path = encoded_path
        media._status = status
        return media

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def encoded_path(self) -> Optional[str]:
        return self._encoded_path

    @property
    def status(self) -> MediaStatus:
        return self._status

    def send_to_encode(self) -> None:
        """Passe le media en PROCESSING, quel que soit son statut courant."""
        self._status = MediaStatus.PROCESSING

    def mark_encoded(self, encoded_path: str) -> None:
        """Passe le media en COMPLETED et enregistre le chemin encode."""
        self._status = MediaStatus.COMPLETED
        self._encoded_path = encoded_path

    def __repr__(self) -> str:
        return (
            f"Media(id={self._id}, file_path={self._file_path!r}, "
            f"status={self._status.name})"
        )
