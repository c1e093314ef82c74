"""Sous-package CLI commands - re-exporte les commandes publiques."""

from mergeversions.adapters.cli.commands.merge_commands import (
    merge_episodes,
    merge_movies,
    split_episodes,
    split_movies,
)
from mergeversions.adapters.cli.commands.library_commands import (
    add_item,
    list_items,
)

__all__ = [
    # merge / split
    "merge_movies",
    "split_movies",
    "merge_episodes",
    "split_episodes",
    # videotheque
    "add_item",
    "list_items",
]
