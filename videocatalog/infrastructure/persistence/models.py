"""
Modeles SQLModel pour la base de donnees VideoCatalog.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (core/entities/)
selon l'architecture hexagonale.

Tables:
- videos: Agregat Video, avec ses visuels et ses medias embarques
- video_categories: Categories d'une video (ordonnees, doublons conserves)
- video_genres: Genres d'une video
- video_cast_members: Membres du casting d'une video

Les trois visuels ont la meme forme (un chemin) : chacun a sa propre colonne
nommee d'apres son role. Les deux medias sont embarques de la meme maniere,
sous forme de groupes de colonnes prefixes par leur role et nullables en bloc.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

UUID_LENGTH = 36


class VideoModel(SQLModel, table=True):
    """
    Modele representant une video dans la base de donnees.

    rating stocke le code symbolique de Rating, *_status le code entier
    de MediaStatus.
    """

    __tablename__ = "videos"

    id: str = Field(primary_key=True, max_length=UUID_LENGTH)
    title: str
    description: str
    year_launched: int
    opened: bool = False
    published: bool = False
    duration: int
    created_at: datetime = Field(sa_type=DateTime)  # Heure locale naive
    rating: str = Field(max_length=2)

    # Visuels - une colonne par role
    thumb_path: str | None = None
    thumb_half_path: str | None = None
    banner_path: str | None = None

    # Media principal - groupe nul si absent
    media_id: str | None = Field(default=None, max_length=UUID_LENGTH)
    media_file_path: str | None = None
    media_encoded_path: str | None = None
    media_status: int | None = None

    # Bande-annonce - groupe nul si absente
    trailer_id: str | None = Field(default=None, max_length=UUID_LENGTH)
    trailer_file_path: str | None = None
    trailer_encoded_path: str | None = None
    trailer_status: int | None = None


class VideoCategoryModel(SQLModel, table=True):
    """Lien video -> categorie, position = rang d'insertion."""

    __tablename__ = "video_categories"

    video_id: str = Field(foreign_key="videos.id", primary_key=True, max_length=UUID_LENGTH)
    position: int = Field(primary_key=True)
    category_id: str = Field(index=True, max_length=UUID_LENGTH)


class VideoGenreModel(SQLModel, table=True):
    """Lien video -> genre, position = rang d'insertion."""

    __tablename__ = "video_genres"

    video_id: str = Field(foreign_key="videos.id", primary_key=True, max_length=UUID_LENGTH)
    position: int = Field(primary_key=True)
    genre_id: str = Field(index=True, max_length=UUID_LENGTH)


class VideoCastMemberModel(SQLModel, table=True):
    """Lien video -> membre du casting, position = rang d'insertion."""

    __tablename__ = "video_cast_members"

    video_id: str = Field(foreign_key="videos.id", primary_key=True, max_length=UUID_LENGTH)
    position: int = Field(primary_key=True)
    cast_member_id: str = Field(index=True, max_length=UUID_LENGTH)
