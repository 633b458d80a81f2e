"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des donnees
- IVideoRepository : Stockage de l'agregat Video
"""

from videocatalog.core.ports.repositories import IVideoRepository

__all__ = [
    "IVideoRepository",
]
