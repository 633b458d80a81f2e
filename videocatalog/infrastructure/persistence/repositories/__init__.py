"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans videocatalog/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre agregat de domaine et modeles DB (SQLModel)
"""

from videocatalog.infrastructure.persistence.repositories.video_repository import (
    SQLModelVideoRepository,
)

__all__ = [
    "SQLModelVideoRepository",
]
