"""
Implementations SQLModel des repositories.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from mergeversions.infrastructure.persistence.repositories.library_repository import (
    SQLModelLibraryRepository,
)

__all__ = [
    "SQLModelLibraryRepository",
]
