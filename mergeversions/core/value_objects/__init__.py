"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- LinkedChild : Lien vers une version alternative (chemin + ID optionnel)
- LibraryQuery : Filtres de requete sur la videotheque
- MediaKind : Type d'element (film, episode, autre)
- VideoType : Format du conteneur video (fichier, ISO, DVD, Blu-ray)
"""

from mergeversions.core.value_objects.linked_child import LinkedChild
from mergeversions.core.value_objects.library_query import (
    LibraryQuery,
    MediaKind,
    VideoType,
)

__all__ = [
    "LinkedChild",
    "LibraryQuery",
    "MediaKind",
    "VideoType",
]
