"""
Erreurs du domaine VideoCatalog.

Taxonomie fermee : les appelants distinguent les erreurs par leur type
(et leurs attributs), jamais en analysant le message.

Toutes les erreurs heritent de VideoCatalogError.
"""


class VideoCatalogError(Exception):
    """Classe de base de toutes les erreurs du domaine."""

    pass


class VideoValidationError(VideoCatalogError):
    """
    Base des violations de regles de validation d'une video.

    Attributes:
        field_name: Nom du champ en faute (ex: "Title")
    """

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(message)


class RequiredFieldError(VideoValidationError):
    """Champ texte obligatoire vide ou compose uniquement d'espaces."""

    def __init__(self, field_name: str) -> None:
        super().__init__(field_name, f"'{field_name}' est obligatoire")


class MaxLengthExceededError(VideoValidationError):
    """
    Champ texte depassant sa longueur maximale.

    Attributes:
        limit: Longueur maximale autorisee (incluse)
    """

    def __init__(self, field_name: str, limit: int) -> None:
        self.limit = limit
        super().__init__(
            field_name,
            f"'{field_name}' doit faire au plus {limit} caracteres",
        )


class MediaNotPresentError(VideoCatalogError):
    """
    Transition d'encodage demandee alors que le media cible est absent.

    Attributes:
        slot: Emplacement du media vise ("media" pour le media principal)
    """

    def __init__(self, slot: str = "media") -> None:
        self.slot = slot
        super().__init__(f"Aucun media present dans l'emplacement '{slot}'")
