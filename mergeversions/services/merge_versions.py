"""
Service de passage complet sur la vidéothèque.

Parcourt tous les films ou épisodes éligibles et regroupe les doublons
(merge) ou sépare les groupes existants (split). L'échec d'un groupe ou
d'un élément est journalisé puis ignoré : le passage continue.

La progression est rapportée sous forme d'entier 0-100 après chaque unité
de travail, suivie d'un 100 final même lorsqu'il n'y avait rien à traiter.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from mergeversions.core.entities.media_item import MediaItem
from mergeversions.core.ports.repositories import ILibraryRepository
from mergeversions.core.value_objects import LibraryQuery, MediaKind
from mergeversions.services.duplicate_grouper import group_duplicates
from mergeversions.services.eligibility import EligibilityFilter
from mergeversions.services.link_reconciler import LinkReconciler

ProgressSink = Callable[[int], None]
StopCheck = Callable[[], bool]


@dataclass
class BatchReport:
    """Bilan d'un passage de regroupement ou de séparation."""

    total: int = 0
    processed: int = 0
    failed: int = 0
    cancelled: bool = False


def progress_percent(current: int, total: int) -> int:
    """Pourcentage d'avancement, demi-unités arrondies au supérieur."""
    return int(current / total * 100 + 0.5)


class MergeVersionsManager:
    """
    Orchestre les passages merge/split sur les films et les épisodes.

    Un seul passage doit tourner à la fois sur une même vidéothèque : le
    service suppose être le seul à écrire pendant toute sa durée.
    """

    def __init__(
        self,
        library_repo: ILibraryRepository,
        eligibility_filter: EligibilityFilter,
        reconciler: LinkReconciler,
    ) -> None:
        """
        Initialise le gestionnaire.

        Args:
            library_repo: Repository de la vidéothèque
            eligibility_filter: Filtre des emplacements exclus
            reconciler: Service de réconciliation des liens
        """
        self._library_repo = library_repo
        self._eligibility_filter = eligibility_filter
        self._reconciler = reconciler

    def get_eligible_items(self, kind: MediaKind) -> list[MediaItem]:
        """Liste les éléments non virtuels d'un type, hors emplacements exclus."""
        query = LibraryQuery(
            kind=kind,
            is_virtual=False,
            has_tmdb_id=True if kind == MediaKind.MOVIE else None,
        )
        return [
            item
            for item in self._library_repo.query(query)
            if self._eligibility_filter.is_eligible(item)
        ]

    def merge_movies(
        self,
        progress: Optional[ProgressSink] = None,
        should_stop: Optional[StopCheck] = None,
    ) -> BatchReport:
        """Regroupe les films partageant le même ID TMDB."""
        with logger.contextualize(operation="MergeMovies"):
            logger.info("Recherche des films en plusieurs versions")
            return self._merge_all(MediaKind.MOVIE, progress, should_stop)

    def merge_episodes(
        self,
        progress: Optional[ProgressSink] = None,
        should_stop: Optional[StopCheck] = None,
    ) -> BatchReport:
        """Regroupe les épisodes identiques (série, saison, titre, numéro, année)."""
        with logger.contextualize(operation="MergeEpisodes"):
            logger.info("Recherche des episodes en plusieurs versions")
            return self._merge_all(MediaKind.EPISODE, progress, should_stop)

    def split_movies(
        self,
        progress: Optional[ProgressSink] = None,
        should_stop: Optional[StopCheck] = None,
    ) -> BatchReport:
        """Sépare tous les films regroupés."""
        with logger.contextualize(operation="SplitMovies"):
            logger.info("Separation de tous les films")
            return self._split_all(MediaKind.MOVIE, progress, should_stop)

    def split_episodes(
        self,
        progress: Optional[ProgressSink] = None,
        should_stop: Optional[StopCheck] = None,
    ) -> BatchReport:
        """Sépare tous les épisodes regroupés."""
        with logger.contextualize(operation="SplitEpisodes"):
            logger.info("Separation de tous les episodes")
            return self._split_all(MediaKind.EPISODE, progress, should_stop)

    def _merge_all(
        self,
        kind: MediaKind,
        progress: Optional[ProgressSink],
        should_stop: Optional[StopCheck],
    ) -> BatchReport:
        groups = group_duplicates(self.get_eligible_items(kind), kind)
        report = BatchReport(total=len(groups))

        for current, group in enumerate(groups, start=1):
            if should_stop and should_stop():
                report.cancelled = True
                logger.warning(f"Passage interrompu apres {current - 1}/{report.total} groupe(s)")
                break

            first = group[0]
            logger.info(f"Regroupement de {first.display_name()} ({first.production_year})")
            try:
                self._reconciler.merge([item.id for item in group])
                report.processed += 1
            except Exception as e:
                report.failed += 1
                logger.exception(
                    f"Erreur lors du regroupement de {first.display_name()} "
                    f"({first.production_year}): {e}"
                )

            if progress:
                progress(progress_percent(current, report.total))

        if progress:
            progress(100)
        return report

    def _split_all(
        self,
        kind: MediaKind,
        progress: Optional[ProgressSink],
        should_stop: Optional[StopCheck],
    ) -> BatchReport:
        items = self.get_eligible_items(kind)
        report = BatchReport(total=len(items))

        for current, item in enumerate(items, start=1):
            if should_stop and should_stop():
                report.cancelled = True
                logger.warning(f"Passage interrompu apres {current - 1}/{report.total} element(s)")
                break

            logger.info(f"Separation de {item.display_name()} ({item.production_year})")
            try:
                self._reconciler.split(item.id)
                report.processed += 1
            except Exception as e:
                report.failed += 1
                logger.exception(
                    f"Erreur lors de la separation de {item.display_name()} "
                    f"({item.production_year}): {e}"
                )

            if progress:
                progress(progress_percent(current, report.total))

        if progress:
            progress(100)
        return report
