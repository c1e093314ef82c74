"""
Service de réconciliation des liens entre versions.

Regroupe les doublons sous une version principale (merge) et défait ce
regroupement (split). Les liens sont identifiés par leur chemin, comparé
sans tenir compte de la casse : un fichier déplacé n'est plus reconnu
comme la même version.

Chaque groupe est traité comme une suite d'écritures non transactionnelle.
Une interruption peut laisser un groupe partiellement regroupé ; un nouveau
passage le réconcilie car les liens obsolètes sont écartés à l'amorçage.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from loguru import logger

from mergeversions.core.entities.media_item import ItemUpdateType, MediaItem
from mergeversions.core.ports.repositories import ILibraryRepository
from mergeversions.core.value_objects import LinkedChild
from mergeversions.services.primary_selector import select_primary


@dataclass
class MergeResult:
    """
    Résultat du regroupement d'un groupe de doublons.

    Attributs:
        primary: Version principale retenue
        alternates: Versions rattachées à la version principale
        links: Liste finale des liens de la version principale
    """

    primary: MediaItem
    alternates: list[MediaItem] = field(default_factory=list)
    links: list[LinkedChild] = field(default_factory=list)


def _has_path(links: Iterable[LinkedChild], path: str) -> bool:
    """Vérifie si un lien de la liste pointe déjà vers ce chemin."""
    return any(link.same_path(path) for link in links)


class LinkReconciler:
    """
    Regroupe et sépare les versions d'un même titre.

    Seule la version principale porte la liste des liens ; chaque
    alternative ne connaît que l'ID de sa version principale.
    """

    def __init__(self, library_repo: ILibraryRepository) -> None:
        """
        Initialise le service.

        Args:
            library_repo: Repository de la vidéothèque
        """
        self._library_repo = library_repo

    def _resolve_videos(self, ids: Iterable[UUID]) -> list[MediaItem]:
        """Résout les IDs en éléments vidéo, triés par ID. Les IDs disparus sont ignorés."""
        items = []
        for item_id in ids:
            item = self._library_repo.get_by_id(item_id)
            if item is None:
                logger.debug(f"Element introuvable, ignore: {item_id}")
                continue
            if item.kind.is_video:
                items.append(item)
        return sorted(items, key=lambda i: i.id)

    def merge(self, ids: Iterable[UUID]) -> Optional[MergeResult]:
        """
        Regroupe les éléments d'un groupe de doublons sous une version principale.

        Args:
            ids: IDs des membres du groupe

        Returns:
            MergeResult, ou None si moins de deux éléments vidéo ont été résolus
        """
        items = self._resolve_videos(ids)
        if len(items) < 2:
            return None

        primary = select_primary(items)

        # Amorcer avec les liens existants dont le chemin exact désigne encore un membre
        links = [
            link
            for link in primary.linked_alternate_versions
            if any(link.path == i.path for i in items)
        ]

        alternates = [i for i in items if i.id != primary.id]
        for item in alternates:
            item.set_primary_version_id(primary.id)
            self._library_repo.update(item, ItemUpdateType.METADATA_EDIT)

            if not _has_path(links, item.path):
                links.append(LinkedChild(path=item.path, item_id=item.id))

            # Une ancienne version principale cède ses propres liens
            for linked in item.linked_alternate_versions:
                if linked.same_path(primary.path) or _has_path(links, linked.path):
                    continue
                links.append(linked)

            if item.linked_alternate_versions:
                item.linked_alternate_versions = []
                self._library_repo.update(item, ItemUpdateType.METADATA_EDIT)

        primary.linked_alternate_versions = links
        self._library_repo.update(primary, ItemUpdateType.METADATA_EDIT)

        logger.debug(
            f"Version principale: {primary.path} ({len(links)} version(s) liee(s))"
        )
        return MergeResult(primary=primary, alternates=alternates, links=links)

    def _resolve_link(self, link: LinkedChild) -> Optional[MediaItem]:
        """Résout un lien par son ID, ou par son chemin à défaut."""
        item = None
        if link.item_id is not None:
            item = self._library_repo.get_by_id(link.item_id)
        if item is None:
            item = self._library_repo.get_by_path(link.path)
        if item is None or not item.kind.is_video:
            return None
        return item

    def split(self, item_id: UUID) -> Optional[int]:
        """
        Rend indépendants tous les membres du groupe auquel appartient un élément.

        Une alternative sans liens propres est redirigée vers sa version
        principale, qui détient la liste de référence.

        Args:
            item_id: ID de n'importe quel membre du groupe

        Returns:
            Nombre d'alternatives détachées, ou None si l'élément est introuvable
        """
        item = self._library_repo.get_by_id(item_id)
        if item is None:
            return None

        if not item.linked_alternate_versions and item.primary_version_uuid is not None:
            item = self._library_repo.get_by_id(item.primary_version_uuid)
            if item is None:
                return None

        released = 0
        for link in item.linked_alternate_versions:
            alternate = self._resolve_link(link)
            if alternate is None or alternate.id == item.id:
                continue
            alternate.set_primary_version_id(None)
            alternate.linked_alternate_versions = []
            self._library_repo.update(alternate, ItemUpdateType.METADATA_EDIT)
            released += 1

        item.linked_alternate_versions = []
        item.set_primary_version_id(None)
        self._library_repo.update(item, ItemUpdateType.METADATA_EDIT)
        return released
