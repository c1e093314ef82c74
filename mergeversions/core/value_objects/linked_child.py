"""
Objet valeur representant un lien vers une version alternative.

Un LinkedChild est la vue qu'a une version principale de l'une de ses
alternatives. L'identite d'un lien est son chemin, compare sans tenir
compte de la casse : deux liens de meme chemin designent la meme version.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class LinkedChild:
    """
    Lien d'une version principale vers une version alternative.

    Attributs :
        path : Chemin du fichier de la version alternative
        item_id : ID de l'element alternatif (None si seul le chemin est connu)
    """

    path: str
    item_id: Optional[UUID] = None

    def same_path(self, path: Optional[str]) -> bool:
        """Compare le chemin du lien a un autre chemin, sans tenir compte de la casse."""
        if path is None:
            return False
        return self.path.casefold() == path.casefold()
