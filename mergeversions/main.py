"""
Point d'entrée CLI de MergeVersions.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    add_item,
    list_items,
    merge_episodes,
    merge_movies,
    split_episodes,
    split_movies,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="mergeversions",
    help="Regroupement des versions multiples de films et d'episodes",
)
container = Container()

# Commandes de regroupement / separation
app.command(name="merge-movies")(merge_movies)
app.command(name="split-movies")(split_movies)
app.command(name="merge-episodes")(merge_episodes)
app.command(name="split-episodes")(split_episodes)

# Commandes de videotheque
app.command(name="add-item")(add_item)
app.command(name="list-items")(list_items)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    if config.locations_excluded:
        typer.echo("Emplacements exclus :")
        for location in config.locations_excluded:
            typer.echo(f"  - {location}")
    else:
        typer.echo("Emplacements exclus : aucun")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MergeVersions v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance l'API HTTP MergeVersions."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("mergeversions.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    container.database.init()

    logger.info("Démarrage de MergeVersions", version=__version__)

    app()


if __name__ == "__main__":
    main()
