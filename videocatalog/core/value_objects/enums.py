"""
Vocabulaires fermes du domaine.

Les valeurs de ces enumerations sont les codes stockes en base :
elles doivent rester stables d'une version a l'autre.
"""

from enum import Enum


class Rating(Enum):
    """Classification indicative d'une video.

    Valeurs:
        ER: Recommande aux adolescents
        L: Tous publics
        RATE10 a RATE18: Deconseille aux moins de 10, 12, 14, 16, 18 ans
    """

    ER = "ER"
    L = "L"
    RATE10 = "10"
    RATE12 = "12"
    RATE14 = "14"
    RATE16 = "16"
    RATE18 = "18"


class MediaStatus(Enum):
    """Statut d'encodage d'un media.

    ERROR fait partie du vocabulaire mais aucune transition du domaine n'y
    mene : il est reserve a l'orchestrateur d'encodage externe.
    """

    PENDING = 0
    PROCESSING = 1
    COMPLETED = 2
    ERROR = 3
