"""
Configuration de la base de donnees SQLite pour MergeVersions.

Ce module fournit :
- Engine SQLite avec configuration optimisee pour multi-thread
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via MERGEVERSIONS_DATABASE_URL
(defaut: sqlite:///mergeversions.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """
    Retourne l'engine SQLite, en le creant si necessaire.

    Utilise la configuration de l'application pour le chemin de la BDD.
    """
    global _engine
    if _engine is None:
        from mergeversions.config import Settings
        settings = Settings()

        # Creer le repertoire parent si l'URL est un fichier SQLite
        db_url = settings.database_url
        if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
            db_path = Path(db_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

        # Les passages web s'executent dans un thread different de la requete
        _engine = create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())

    Ou avec context manager :
        with Session(get_engine()) as session:
            # operations

    Yields:
        Session SQLModel connectee a l'engine SQLite
    """
    with Session(get_engine()) as session:
        yield session


def init_db() -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from mergeversions.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(get_engine())
