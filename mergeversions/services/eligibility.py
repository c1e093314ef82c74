"""
Filtre d'éligibilité des éléments au regroupement de versions.

Un élément situé sous un emplacement exclu de la configuration ne participe
ni au regroupement ni à la séparation.
"""

from collections.abc import Iterable
from pathlib import Path

from mergeversions.core.entities.media_item import MediaItem
from mergeversions.core.ports.file_system import IFileSystem


class EligibilityFilter:
    """Décide si un élément participe au regroupement de versions."""

    def __init__(
        self,
        file_system: IFileSystem,
        locations_excluded: Iterable[Path | str] = (),
    ) -> None:
        """
        Initialise le filtre.

        Args:
            file_system: Adaptateur de comparaison de chemins
            locations_excluded: Emplacements dont le contenu est ignoré
        """
        self._file_system = file_system
        self._locations_excluded = tuple(str(loc) for loc in locations_excluded)

    def is_eligible(self, item: MediaItem) -> bool:
        """Retourne False si un emplacement exclu contient le chemin de l'élément."""
        return not any(
            self._file_system.contains_sub_path(location, item.path)
            for location in self._locations_excluded
        )
