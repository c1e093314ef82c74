"""
Sélection de la version principale d'un groupe de doublons.

Ordre de préférence :
1. Un élément déjà marqué multi-sources (media_source_count > 1) et sans
   version principale est conservé tel quel.
2. Sinon, un fichier vidéo 2D classique passe avant une image disque
   (ISO, DVD, Blu-ray) ou une version 3D.
3. À rang égal, la plus grande largeur de flux vidéo l'emporte.
4. À égalité complète, le premier élément rencontré l'emporte.
"""

from collections.abc import Sequence

from mergeversions.core.entities.media_item import MediaItem


# ====================
# Rangs de type de source
# ====================

RANK_PLAIN_FILE = 0
RANK_OTHER = 1


def source_rank(item: MediaItem) -> int:
    """Rang du type de source : 0 pour un fichier 2D classique, 1 sinon."""
    return RANK_PLAIN_FILE if item.is_plain_file else RANK_OTHER


def stream_width(item: MediaItem) -> int:
    """Largeur du flux vidéo par défaut, 0 si inconnue."""
    return item.default_stream_width or 0


def select_primary(members: Sequence[MediaItem]) -> MediaItem:
    """
    Choisit la version principale d'un groupe.

    Args:
        members: Membres du groupe (au moins deux), dans un ordre stable

    Returns:
        L'élément retenu comme version principale

    Raises:
        ValueError: si le groupe compte moins de deux membres
    """
    if len(members) < 2:
        raise ValueError(f"Un groupe de versions exige au moins 2 membres ({len(members)})")

    for item in members:
        if item.is_designated_bundle:
            return item

    # sorted() est stable : à égalité, l'ordre d'entrée est conservé
    ranked = sorted(members, key=lambda i: (source_rank(i), -stream_width(i)))
    return ranked[0]
