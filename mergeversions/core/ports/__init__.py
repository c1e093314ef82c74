"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository :
- ILibraryRepository : Lecture, requête et mise à jour de la vidéothèque
- RepositoryError : Échec de persistance

Ports système de fichiers :
- IFileSystem : Test d'appartenance d'un chemin à un répertoire
"""

from mergeversions.core.ports.repositories import (
    ILibraryRepository,
    RepositoryError,
)
from mergeversions.core.ports.file_system import IFileSystem

__all__ = [
    # Repositories
    "ILibraryRepository",
    "RepositoryError",
    # Système de fichiers
    "IFileSystem",
]
