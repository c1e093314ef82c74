"""
MergeVersions - Regroupement des versions multiples d'un même film ou épisode.

Ce package détecte les doublons d'une vidéothèque (même film ou même épisode
présent dans plusieurs fichiers : résolutions, éditions, 3D) et les rattache
à une version principale. L'opération inverse rend chaque élément indépendant.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (regroupement, sélection, réconciliation)
- adapters/ : Couche infrastructure (CLI, système de fichiers)
- infrastructure/ : Persistance SQLModel
- web/ : API HTTP FastAPI
"""
