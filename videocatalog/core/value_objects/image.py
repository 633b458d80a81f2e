"""
Objet valeur pour les visuels d'une video.

Un visuel (miniature, demi-miniature, banniere) n'a pas d'identite propre :
il est entierement defini par son chemin.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Image:
    """
    Visuel d'une video, compare par valeur.

    Deux Image sont egales si et seulement si leurs chemins sont egaux.
    Aucune verification du format ou de l'existence du chemin.

    Attributs :
        path : Chemin du fichier image
    """

    path: str
