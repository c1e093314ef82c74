"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem. Les comparaisons portent sur les
chemins normalises (separateurs redondants, '.' et '..') sans acceder au disque :
un emplacement exclu peut designer un volume non monte.
"""

import os
from pathlib import PurePath

from mergeversions.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """Implementation de IFileSystem pour le systeme de fichiers reel."""

    def contains_sub_path(self, parent_path: str, path: str) -> bool:
        """Verifie si path vaut parent_path ou se trouve en dessous."""
        if not parent_path or not path:
            return False

        parent = PurePath(os.path.normpath(os.path.expanduser(parent_path)))
        child = PurePath(os.path.normpath(path))
        try:
            child.relative_to(parent)
            return True
        except ValueError:
            return False
