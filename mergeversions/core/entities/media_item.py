"""
Entité élément vidéo de la vidéothèque.

Un MediaItem représente un film ou un épisode tel que stocké par la
vidéothèque. Le domaine ne modifie que deux champs : la référence vers la
version principale et la liste des versions alternatives liées.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from uuid import UUID

from mergeversions.core.value_objects import LinkedChild, MediaKind, VideoType


class ItemUpdateType(Enum):
    """Nature d'une écriture dans la vidéothèque."""

    METADATA_EDIT = "metadata_edit"  # Modification des métadonnées seules, fichiers intacts


class VersionRole(Enum):
    """Rôle d'un élément dans un groupe de versions."""

    PRIMARY = "primary"  # Porte la liste des versions alternatives
    ALTERNATE = "alternate"  # Référence sa version principale
    STANDALONE = "standalone"  # Ni l'un ni l'autre


def format_item_id(item_id: UUID) -> str:
    """Encode un ID en hexadécimal minuscule sans séparateurs (32 caractères)."""
    return item_id.hex


@dataclass
class MediaItem:
    """
    Représente un film ou un épisode avec ses informations de version.

    Attributs :
        id : Identifiant unique
        kind : Type d'élément (film, épisode, autre)
        path : Chemin du fichier sur le disque, clé secondaire des liens
        title : Titre affiché (titre de l'épisode pour une série)
        production_year : Année de production
        series_name : Nom de la série (épisodes uniquement)
        season_name : Nom de la saison (épisodes uniquement)
        index_number : Numéro de l'épisode dans la saison
        tmdb_id : ID The Movie Database (films)
        media_source_count : Nombre de sources déjà rattachées à l'élément
        primary_version_id : ID hexadécimal de la version principale, si alternative
        linked_alternate_versions : Versions alternatives (version principale uniquement)
        video_type : Format du conteneur vidéo
        video_3d_format : Format 3D (None pour une vidéo 2D)
        default_stream_width : Largeur du flux vidéo par défaut en pixels
        is_virtual : Élément virtuel (fichier absent)
    """

    id: UUID
    kind: MediaKind = MediaKind.MOVIE
    path: str = ""
    title: str = ""
    production_year: Optional[int] = None
    series_name: Optional[str] = None
    season_name: Optional[str] = None
    index_number: Optional[int] = None
    tmdb_id: Optional[str] = None
    media_source_count: int = 1
    primary_version_id: Optional[str] = None
    linked_alternate_versions: list[LinkedChild] = field(default_factory=list)
    video_type: VideoType = VideoType.VIDEO_FILE
    video_3d_format: Optional[str] = None
    default_stream_width: Optional[int] = None
    is_virtual: bool = False

    @property
    def role(self) -> VersionRole:
        """Rôle de l'élément déduit de ses liens."""
        if self.primary_version_id:
            return VersionRole.ALTERNATE
        if self.linked_alternate_versions:
            return VersionRole.PRIMARY
        return VersionRole.STANDALONE

    @property
    def is_plain_file(self) -> bool:
        """Fichier vidéo classique en 2D (ni image disque, ni 3D)."""
        return self.video_type == VideoType.VIDEO_FILE and self.video_3d_format is None

    @property
    def is_designated_bundle(self) -> bool:
        """Élément déjà marqué multi-sources à l'import, sans version principale."""
        return self.media_source_count > 1 and not self.primary_version_id

    @property
    def primary_version_uuid(self) -> Optional[UUID]:
        """Référence vers la version principale décodée, ou None."""
        if not self.primary_version_id:
            return None
        return UUID(self.primary_version_id)

    def set_primary_version_id(self, primary_id: Optional[UUID]) -> None:
        """Rattache l'élément à une version principale, ou l'en détache (None)."""
        self.primary_version_id = format_item_id(primary_id) if primary_id else None

    def display_name(self) -> str:
        """Libellé court pour les logs."""
        if self.kind == MediaKind.EPISODE and self.series_name:
            return f"{self.series_name} - {self.title}"
        return self.title
