"""
VideoCatalog - Agregat de catalogue video et sa persistance.

Ce package modelise une video du catalogue (metadonnees, visuels, workflow
d'encodage du media principal, associations de taxonomie) et fournit
l'adaptateur de persistance SQLModel qui la stocke.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, objets valeur, ports, erreurs)
- infrastructure/ : Couche infrastructure (BDD, repositories)
- main.py : Point d'entree CLI (hote de persistance)
"""

__version__ = "0.1.0"
