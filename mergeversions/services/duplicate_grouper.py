"""
Regroupement des éléments représentant le même titre.

Deux films sont des doublons s'ils partagent le même ID TMDB. Deux épisodes
sont des doublons s'ils partagent série, saison, titre, numéro et année.
"""

from collections.abc import Hashable, Iterable

from mergeversions.core.entities.media_item import MediaItem
from mergeversions.core.value_objects import MediaKind


def identity_key(item: MediaItem, kind: MediaKind) -> Hashable:
    """Clé d'identité d'un élément selon son type."""
    if kind == MediaKind.MOVIE:
        return item.tmdb_id
    return (
        item.series_name,
        item.season_name,
        item.title,
        item.index_number,
        item.production_year,
    )


def group_duplicates(
    items: Iterable[MediaItem], kind: MediaKind
) -> list[list[MediaItem]]:
    """
    Partitionne les éléments en groupes de doublons.

    Les groupes d'un seul élément sont écartés. L'ordre des groupes suit la
    première apparition de chaque clé, l'ordre des membres suit l'ordre d'entrée.

    Args:
        items: Éléments à regrouper
        kind: Type des éléments (détermine la clé d'identité)

    Returns:
        Liste des groupes d'au moins deux éléments
    """
    groups: dict[Hashable, list[MediaItem]] = {}
    for item in items:
        groups.setdefault(identity_key(item, kind), []).append(item)
    return [members for members in groups.values() if len(members) > 1]
