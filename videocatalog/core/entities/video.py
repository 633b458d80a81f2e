"""
Agregat Video.

La Video est la racine d'agregat du catalogue : toutes les mutations de ses
visuels, de ses medias et de ses associations passent par ses methodes.
Les champs sont exposes en lecture seule ; la validation du contenu n'est
jamais automatique et doit etre demandee via validate().
"""

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

from videocatalog.core.entities.media import Media
from videocatalog.core.exceptions import MediaNotPresentError
from videocatalog.core.validators import VideoValidator
from videocatalog.core.value_objects import Image, Rating


class Video:
    """
    Video du catalogue (racine d'agregat).

    Possede trois emplacements de visuels (thumb, thumb_half, banner), un media
    principal, une bande-annonce et trois listes d'identifiants externes
    (categories, genres, membres du casting).

    Les listes d'associations sont des multi-ensembles ordonnes : l'ajout
    n'elimine pas les doublons et la suppression ne retire qu'une occurrence.

    Attributs (lecture seule) :
        id : Identifiant unique genere a la creation (immuable)
        title : Titre (obligatoire, 255 caracteres max a la validation)
        description : Description (obligatoire, 4000 caracteres max)
        year_launched : Annee de sortie
        opened : Video ouverte
        published : Video publiee
        duration : Duree (unite non imposee)
        created_at : Date de creation (immuable)
        rating : Classification indicative
        thumb, thumb_half, banner : Visuels ou None
        media, trailer : Medias ou None
        categories, genres, cast_members : Tuples d'identifiants
    """

    def __init__(
        self,
        title: str,
        description: str,
        year_launched: int,
        opened: bool,
        published: bool,
        duration: int,
        rating: Rating,
    ) -> None:
        self._id: UUID = uuid4()
        self._title = title
        self._description = description
        self._year_launched = year_launched
        self._opened = opened
        self._published = published
        self._duration = duration
        self._rating = rating
        self._created_at = datetime.now()

        self._thumb: Optional[Image] = None
        self._thumb_half: Optional[Image] = None
        self._banner: Optional[Image] = None

        self._media: Optional[Media] = None
        self._trailer: Optional[Media] = None

        self._categories: list[UUID] = []
        self._genres: list[UUID] = []
        self._cast_members: list[UUID] = []

    @classmethod
    def restore(
        cls,
        *,
        id: UUID,
        title: str,
        description: str,
        year_launched: int,
        opened: bool,
        published: bool,
        duration: int,
        rating: Rating,
        created_at: datetime,
        thumb: Optional[Image] = None,
        thumb_half: Optional[Image] = None,
        banner: Optional[Image] = None,
        media: Optional[Media] = None,
        trailer: Optional[Media] = None,
        categories: Iterable[UUID] = (),
        genres: Iterable[UUID] = (),
        cast_members: Iterable[UUID] = (),
    ) -> "Video":
        """
        Reconstruit une Video persistee.

        Reserve aux adaptateurs de persistance : conserve l'identite et la date
        de creation d'origine au lieu d'en generer de nouvelles.
        """
        video = cls(title, description, year_launched, opened, published, duration, rating)
        video._id = id
        video._created_at = created_at
        video._thumb = thumb
        video._thumb_half = thumb_half
        video._banner = banner
        video._media = media
        video._trailer = trailer
        video._categories = list(categories)
        video._genres = list(genres)
        video._cast_members = list(cast_members)
        return video

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def year_launched(self) -> int:
        return self._year_launched

    @property
    def opened(self) -> bool:
        return self._opened

    @property
    def published(self) -> bool:
        return self._published

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def rating(self) -> Rating:
        return self._rating

    @property
    def thumb(self) -> Optional[Image]:
        return self._thumb

    @property
    def thumb_half(self) -> Optional[Image]:
        return self._thumb_half

    @property
    def banner(self) -> Optional[Image]:
        return self._banner

    @property
    def media(self) -> Optional[Media]:
        return self._media

    @property
    def trailer(self) -> Optional[Media]:
        return self._trailer

    @property
    def categories(self) -> tuple[UUID, ...]:
        return tuple(self._categories)

    @property
    def genres(self) -> tuple[UUID, ...]:
        return tuple(self._genres)

    @property
    def cast_members(self) -> tuple[UUID, ...]:
        return tuple(self._cast_members)

    # ------------------------------------------------------------------
    # Metadonnees
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """
        Verifie titre et description.

        Raises:
            RequiredFieldError: Titre ou description vide
            MaxLengthExceededError: Titre ou description trop long
        """
        VideoValidator(self).validate()

    def update(
        self,
        title: str,
        description: str,
        year_launched: int,
        opened: bool,
        published: bool,
        duration: int,
        rating: Optional[Rating] = None,
    ) -> None:
        """
        Remplace les metadonnees de la video.

        Tous les champs sont remplaces, sauf rating qui n'est remplace que
        s'il est fourni. Ne valide pas et ne touche ni aux visuels, ni aux
        medias, ni aux associations.
        """
        self._title = title
        self._description = description
        self._year_launched = year_launched
        self._opened = opened
        self._published = published
        self._duration = duration
        if rating is not None:
            self._rating = rating

    # ------------------------------------------------------------------
    # Visuels
    # ------------------------------------------------------------------

    def update_thumb(self, path: str) -> None:
        self._thumb = Image(path)

    def update_thumb_half(self, path: str) -> None:
        self._thumb_half = Image(path)

    def update_banner(self, path: str) -> None:
        self._banner = Image(path)

    # ------------------------------------------------------------------
    # Medias et encodage
    # ------------------------------------------------------------------

    def update_media(self, path: str) -> None:
        """Remplace le media principal par un nouveau media PENDING."""
        self._media = Media(path)

    def update_trailer(self, path: str) -> None:
        """Remplace la bande-annonce par un nouveau media PENDING."""
        self._trailer = Media(path)

    def update_as_sent_to_encode(self) -> None:
        """
        Marque le media principal comme envoye a l'encodage.

        Aucun controle du statut courant : un media deja PROCESSING ou
        COMPLETED repasse en PROCESSING.

        Raises:
            MediaNotPresentError: Aucun media principal
        """
        if self._media is None:
            raise MediaNotPresentError("media")
        self._media.send_to_encode()

    def update_as_encoded(self, encoded_path: str) -> None:
        """
        Marque le media principal comme encode.

        Raises:
            MediaNotPresentError: Aucun media principal
        """
        if self._media is None:
            raise MediaNotPresentError("media")
        self._media.mark_encoded(encoded_path)

    # ------------------------------------------------------------------
    # Associations
    # ------------------------------------------------------------------

    def add_category(self, category_id: UUID) -> None:
        self._categories.append(category_id)

    def remove_category(self, category_id: UUID) -> None:
        _remove_first(self._categories, category_id)

    def remove_all_categories(self) -> None:
        self._categories = []

    def add_genre(self, genre_id: UUID) -> None:
        self._genres.append(genre_id)

    def remove_genre(self, genre_id: UUID) -> None:
        _remove_first(self._genres, genre_id)

    def remove_all_genres(self) -> None:
        self._genres = []

    def add_cast_member(self, cast_member_id: UUID) -> None:
        self._cast_members.append(cast_member_id)

    def remove_cast_member(self, cast_member_id: UUID) -> None:
        _remove_first(self._cast_members, cast_member_id)

    def remove_all_cast_members(self) -> None:
        self._cast_members = []

    def __repr__(self) -> str:
        return f"Video(id={self._id}, title={self._title!r})"


def _remove_first(items: list[UUID], item: UUID) -> None:
    """Retire la premiere occurrence de item, sans erreur si absent."""
    if item in items:
        items.remove(item)
