"""
Configuration du logging de l'application via loguru.

Deux sorties :
- console (stderr) : colorée, préfixée par le passage en cours
- fichier : JSON avec rotation, chaque enregistrement porte extra.operation

Le passage en cours (MergeMovies, SplitEpisodes, ...) est ajouté par
MergeVersionsManager via logger.contextualize(operation=...). Hors passage,
le champ vaut NO_OPERATION.
"""

import sys
from pathlib import Path

from loguru import logger

NO_OPERATION = "-"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[operation]: <13}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/mergeversions.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les sorties console et fichier.

    Args :
        log_level : Niveau minimum pour la console (le fichier reçoit tout)
        log_file : Chemin du fichier JSON
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    logger.remove()
    logger.configure(extra={"operation": NO_OPERATION})

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # les passages web tournent dans un thread
    )

    logger.debug(f"Logging configuré: {log_file} (rotation {rotation_size})")
