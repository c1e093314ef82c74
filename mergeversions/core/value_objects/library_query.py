"""
Objets valeur pour l'interrogation de la videotheque.
"""

from dataclasses import dataclass
from enum import Enum


class MediaKind(Enum):
    """Type d'element de la videotheque."""

    MOVIE = "movie"
    EPISODE = "episode"
    OTHER = "other"  # Dossier, saison, piste audio...

    @property
    def is_video(self) -> bool:
        """Seuls les films et episodes portent des versions multiples."""
        return self in (MediaKind.MOVIE, MediaKind.EPISODE)


class VideoType(Enum):
    """Format du conteneur video d'un element."""

    VIDEO_FILE = "video_file"
    ISO = "iso"
    DVD = "dvd"
    BLURAY = "bluray"


@dataclass(frozen=True)
class LibraryQuery:
    """
    Filtres d'une requete sur la videotheque.

    La videotheque est une table plate : toute requete est recursive.

    Attributs :
        kind : Type d'element recherche
        is_virtual : Filtre sur les elements virtuels (None = pas de filtre)
        has_tmdb_id : Exiger (True) ou exclure (False) un ID TMDB, None = indifferent
    """

    kind: MediaKind
    is_virtual: bool | None = False
    has_tmdb_id: bool | None = None
