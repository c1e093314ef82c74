"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from mergeversions.core.entities.media_item import ItemUpdateType, MediaItem
from mergeversions.core.value_objects import LibraryQuery


class RepositoryError(Exception):
    """Échec d'une lecture ou d'une écriture dans la vidéothèque."""


class ILibraryRepository(ABC):
    """
    Interface de la vidéothèque.

    La vidéothèque est un état partagé que le domaine ne possède pas : il
    l'interroge, lit des éléments par ID et persiste ses modifications.
    """

    @abstractmethod
    def query(self, query: LibraryQuery) -> list[MediaItem]:
        """Liste les éléments correspondant aux filtres, dans l'ordre de stockage."""
        ...

    @abstractmethod
    def get_by_id(self, item_id: UUID) -> Optional[MediaItem]:
        """Récupère un élément par son ID, None s'il n'existe plus."""
        ...

    @abstractmethod
    def get_by_path(self, path: str) -> Optional[MediaItem]:
        """Récupère un élément par son chemin (comparaison sans casse)."""
        ...

    @abstractmethod
    def update(self, item: MediaItem, update_type: ItemUpdateType) -> None:
        """
        Persiste les champs de version modifiés d'un élément existant.

        Lève :
            RepositoryError : si l'élément n'existe pas ou si l'écriture échoue
        """
        ...

    @abstractmethod
    def save(self, item: MediaItem) -> MediaItem:
        """Sauvegarde un élément (insertion ou mise à jour complète)."""
        ...
