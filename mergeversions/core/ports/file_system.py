"""
Interfaces ports pour le système de fichiers.

Le domaine ne lit ni n'écrit de fichiers : il a seulement besoin de savoir
si un chemin se trouve sous un emplacement exclu.
"""

from abc import ABC, abstractmethod


class IFileSystem(ABC):
    """Interface des opérations sur les chemins."""

    @abstractmethod
    def contains_sub_path(self, parent_path: str, path: str) -> bool:
        """
        Vérifie si un chemin est égal à un répertoire ou situé en dessous.

        Args :
            parent_path : Répertoire parent candidat
            path : Chemin à tester

        Retourne :
            True si path vaut parent_path ou en est un descendant
        """
        ...
