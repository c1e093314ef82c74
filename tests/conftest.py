"""
Fixtures pytest partagees pour les tests MergeVersions.

Ce module contient les fixtures communes utilisees dans les tests:
- Repository en memoire implementant ILibraryRepository
- Fabriques de films et d'episodes
- Services assembles sur le repository en memoire
- Settings de test avec chemins temporaires
"""

import copy
import uuid
from pathlib import Path
from typing import Callable, Optional
from uuid import UUID

import pytest

from mergeversions.adapters.file_system import FileSystemAdapter
from mergeversions.config import Settings
from mergeversions.core.entities.media_item import ItemUpdateType, MediaItem
from mergeversions.core.ports.repositories import ILibraryRepository, RepositoryError
from mergeversions.core.value_objects import LibraryQuery, MediaKind, VideoType
from mergeversions.services.eligibility import EligibilityFilter
from mergeversions.services.link_reconciler import LinkReconciler
from mergeversions.services.merge_versions import MergeVersionsManager


class InMemoryLibraryRepository(ILibraryRepository):
    """
    Videotheque en memoire pour les tests.

    Stocke des copies : une modification d'entite n'est visible qu'apres update().
    Les appels a update() sont enregistres dans `updates` (chemin, type).
    Les IDs de `fail_on_update` levent RepositoryError a l'ecriture.
    """

    def __init__(self) -> None:
        self._items: dict[UUID, MediaItem] = {}
        self.updates: list[tuple[str, ItemUpdateType]] = []
        self.fail_on_update: set[UUID] = set()

    def add(self, *items: MediaItem) -> None:
        for item in items:
            self._items[item.id] = copy.deepcopy(item)

    def remove(self, item_id: UUID) -> None:
        del self._items[item_id]

    def query(self, query: LibraryQuery) -> list[MediaItem]:
        result = []
        for item in self._items.values():
            if item.kind != query.kind:
                continue
            if query.is_virtual is not None and item.is_virtual != query.is_virtual:
                continue
            if query.has_tmdb_id is True and not item.tmdb_id:
                continue
            if query.has_tmdb_id is False and item.tmdb_id:
                continue
            result.append(copy.deepcopy(item))
        return result

    def get_by_id(self, item_id: UUID) -> Optional[MediaItem]:
        item = self._items.get(item_id)
        return copy.deepcopy(item) if item else None

    def get_by_path(self, path: str) -> Optional[MediaItem]:
        for item in self._items.values():
            if item.path.lower() == path.lower():
                return copy.deepcopy(item)
        return None

    def update(self, item: MediaItem, update_type: ItemUpdateType) -> None:
        if item.id in self.fail_on_update:
            raise RepositoryError(f"Echec simule: {item.path}")
        if item.id not in self._items:
            raise RepositoryError(f"Element introuvable: {item.id}")
        stored = self._items[item.id]
        stored.primary_version_id = item.primary_version_id
        stored.linked_alternate_versions = list(item.linked_alternate_versions)
        self.updates.append((item.path, update_type))

    def save(self, item: MediaItem) -> MediaItem:
        self._items[item.id] = copy.deepcopy(item)
        return copy.deepcopy(item)

    def stored(self, item_id: UUID) -> MediaItem:
        """Etat persiste d'un element (copie)."""
        return copy.deepcopy(self._items[item_id])


@pytest.fixture
def library_repo() -> InMemoryLibraryRepository:
    """Videotheque en memoire vide."""
    return InMemoryLibraryRepository()


@pytest.fixture
def reconciler(library_repo) -> LinkReconciler:
    """LinkReconciler branche sur la videotheque en memoire."""
    return LinkReconciler(library_repo=library_repo)


@pytest.fixture
def eligibility_filter() -> EligibilityFilter:
    """Filtre sans emplacement exclu."""
    return EligibilityFilter(file_system=FileSystemAdapter())


@pytest.fixture
def manager(library_repo, eligibility_filter, reconciler) -> MergeVersionsManager:
    """MergeVersionsManager assemble sur la videotheque en memoire."""
    return MergeVersionsManager(
        library_repo=library_repo,
        eligibility_filter=eligibility_filter,
        reconciler=reconciler,
    )


@pytest.fixture
def make_movie() -> Callable[..., MediaItem]:
    """
    Fabrique de films.

    Les IDs sont generes dans l'ordre croissant pour que l'ordre de creation
    corresponde au tri par ID du reconciler.
    """
    counter = iter(range(1, 10_000))

    def _make(
        path: str,
        tmdb_id: Optional[str] = "550",
        title: str = "Fight Club",
        year: Optional[int] = 1999,
        width: Optional[int] = 1920,
        video_type: VideoType = VideoType.VIDEO_FILE,
        format_3d: Optional[str] = None,
        sources: int = 1,
        **kwargs,
    ) -> MediaItem:
        return MediaItem(
            id=UUID(int=next(counter)),
            kind=MediaKind.MOVIE,
            path=path,
            title=title,
            production_year=year,
            tmdb_id=tmdb_id,
            default_stream_width=width,
            video_type=video_type,
            video_3d_format=format_3d,
            media_source_count=sources,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_episode() -> Callable[..., MediaItem]:
    """Fabrique d'episodes (serie "X", saison "1", "Pilot", episode 1, 2020)."""

    def _make(
        path: str,
        series: str = "X",
        season: str = "1",
        title: str = "Pilot",
        index: Optional[int] = 1,
        year: Optional[int] = 2020,
        width: Optional[int] = 1920,
        **kwargs,
    ) -> MediaItem:
        return MediaItem(
            id=uuid.uuid4(),
            kind=MediaKind.EPISODE,
            path=path,
            title=title,
            production_year=year,
            series_name=series,
            season_name=season,
            index_number=index,
            default_stream_width=width,
            **kwargs,
        )

    return _make


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans un repertoire temporaire."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        locations_excluded=[tmp_path / "excluded"],
        log_file=tmp_path / "test.log",
    )
