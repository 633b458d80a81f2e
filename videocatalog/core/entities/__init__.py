"""
Entites metier du catalogue.

Les entites sont des objets mutables avec une identite qui persiste dans le temps.
Elles encapsulent les regles metier et leurs transitions.

Exports:
- Video : Racine d'agregat du catalogue
- Media : Fichier media suivi a travers l'encodage
"""

from videocatalog.core.entities.media import Media
from videocatalog.core.entities.video import Video

__all__ = [
    "Video",
    "Media",
]
