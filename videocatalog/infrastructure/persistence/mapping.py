"""
Correspondance entre l'agregat Video et ses colonnes.

Les tables de correspondance ci-dessous sont la seule source des noms de
colonnes par emplacement. Elles servent aux deux sens de conversion, ce qui
garantit qu'un visuel ou un media est toujours relu dans l'emplacement ou il
a ete ecrit.
"""

from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from sqlmodel import SQLModel

from videocatalog.core.entities.media import Media
from videocatalog.core.value_objects import Image, MediaStatus
from videocatalog.infrastructure.persistence.models import (
    VideoCastMemberModel,
    VideoCategoryModel,
    VideoGenreModel,
    VideoModel,
)

# Emplacement de visuel -> colonne du chemin
IMAGE_SLOT_COLUMNS: dict[str, str] = {
    "thumb": "thumb_path",
    "thumb_half": "thumb_half_path",
    "banner": "banner_path",
}

# Emplacement de media -> prefixe du groupe de colonnes
MEDIA_SLOT_PREFIXES: dict[str, str] = {
    "media": "media",
    "trailer": "trailer",
}

_MEDIA_FIELDS = ("id", "file_path", "encoded_path", "status")


@dataclass(frozen=True)
class AssociationLink:
    """
    Correspondance d'une liste d'associations vers sa table de liens.

    Attributs:
        attribute: Nom de la liste sur l'agregat (ex: "categories")
        model: Modele de la table de liens
        target_column: Colonne portant l'identifiant reference
    """

    attribute: str
    model: type[SQLModel]
    target_column: str


ASSOCIATION_LINKS: tuple[AssociationLink, ...] = (
    AssociationLink("categories", VideoCategoryModel, "category_id"),
    AssociationLink("genres", VideoGenreModel, "genre_id"),
    AssociationLink("cast_members", VideoCastMemberModel, "cast_member_id"),
)


def media_columns(prefix: str) -> dict[str, str]:
    """Noms des colonnes du groupe d'un media (champ -> colonne)."""
    return {name: f"{prefix}_{name}" for name in _MEDIA_FIELDS}


def image_to_columns(slot: str, image: Optional[Image]) -> dict[str, Any]:
    """Colonnes d'un emplacement de visuel (None si absent)."""
    return {IMAGE_SLOT_COLUMNS[slot]: image.path if image is not None else None}


def image_from_columns(slot: str, model: VideoModel) -> Optional[Image]:
    """Reconstruit le visuel d'un emplacement, None si sa colonne est nulle."""
    path = getattr(model, IMAGE_SLOT_COLUMNS[slot])
    if path is None:
        return None
    return Image(path)


def media_to_columns(slot: str, media: Optional[Media]) -> dict[str, Any]:
    """Colonnes du groupe d'un emplacement de media, toutes nulles si absent."""
    columns = media_columns(MEDIA_SLOT_PREFIXES[slot])
    if media is None:
        return dict.fromkeys(columns.values())
    return {
        columns["id"]: str(media.id),
        columns["file_path"]: media.file_path,
        columns["encoded_path"]: media.encoded_path,
        columns["status"]: media.status.value,
    }


def media_from_columns(slot: str, model: VideoModel) -> Optional[Media]:
    """Reconstruit le media d'un emplacement, None si file_path est nul."""
    columns = media_columns(MEDIA_SLOT_PREFIXES[slot])
    file_path = getattr(model, columns["file_path"])
    if file_path is None:
        return None
    return Media.restore(
        id=UUID(getattr(model, columns["id"])),
        file_path=file_path,
        encoded_path=getattr(model, columns["encoded_path"]),
        status=MediaStatus(getattr(model, columns["status"])),
    )
