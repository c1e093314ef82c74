"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- file_system : Comparaison de chemins pour les emplacements exclus

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from mergeversions.adapters.file_system import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
