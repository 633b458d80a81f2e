"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement compares par valeur.

Exports :
- Image : Visuel d'une video (chemin)
- Rating : Classification indicative (7 valeurs)
- MediaStatus : Statut d'encodage d'un media
"""

from videocatalog.core.value_objects.enums import MediaStatus, Rating
from videocatalog.core.value_objects.image import Image

__all__ = [
    "Image",
    "Rating",
    "MediaStatus",
]
