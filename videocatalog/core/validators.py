"""
Regles de validation de l'agregat Video.

La validation n'est jamais declenchee par les mutations : elle est invoquee
explicitement via Video.validate(). Les regles sont verifiees dans l'ordre
et la premiere violation est levee.
"""

from typing import TYPE_CHECKING

from videocatalog.core.exceptions import MaxLengthExceededError, RequiredFieldError

if TYPE_CHECKING:
    from videocatalog.core.entities.video import Video

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 4_000


class VideoValidator:
    """
    Verifie le titre puis la description d'une video.

    Sans effet de bord : la video n'est jamais modifiee.

    Utilisation:
        VideoValidator(video).validate()
    """

    def __init__(self, video: "Video") -> None:
        self._video = video

    def validate(self) -> None:
        """
        Execute les regles dans l'ordre.

        Raises:
            RequiredFieldError: Titre ou description vide (espaces ignores)
            MaxLengthExceededError: Titre > 255 ou description > 4000 caracteres
        """
        self._validate_text("Title", self._video.title, TITLE_MAX_LENGTH)
        self._validate_text(
            "Description", self._video.description, DESCRIPTION_MAX_LENGTH
        )

    @staticmethod
    def _validate_text(field_name: str, value: str, max_length: int) -> None:
        if not value or not value.strip():
            raise RequiredFieldError(field_name)
        if len(value) > max_length:
            raise MaxLengthExceededError(field_name, max_length)
