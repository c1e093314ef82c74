"""
Commandes CLI d'inspection et d'alimentation de la videotheque.

- add-item : enregistre un film ou un episode
- list-items : affiche les elements avec leur role de version
"""

import uuid
from typing import Annotated, Optional

import typer
from rich.table import Table

from mergeversions.adapters.cli.helpers import console
from mergeversions.container import Container
from mergeversions.core.entities.media_item import MediaItem, VersionRole
from mergeversions.core.value_objects import LibraryQuery, MediaKind, VideoType

_ROLE_STYLES = {
    VersionRole.PRIMARY: "[green]principale[/green]",
    VersionRole.ALTERNATE: "[cyan]alternative[/cyan]",
    VersionRole.STANDALONE: "[dim]independante[/dim]",
}


def add_item(
    path: Annotated[str, typer.Argument(help="Chemin du fichier video")],
    title: Annotated[str, typer.Option("--title", "-t", help="Titre (de l'episode pour une serie)")],
    kind: Annotated[MediaKind, typer.Option("--kind", "-k", help="Type d'element")] = MediaKind.MOVIE,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Annee de production")] = None,
    tmdb_id: Annotated[Optional[str], typer.Option("--tmdb-id", help="ID TMDB (films)")] = None,
    series: Annotated[Optional[str], typer.Option("--series", help="Nom de la serie")] = None,
    season: Annotated[Optional[str], typer.Option("--season", help="Nom de la saison")] = None,
    index: Annotated[Optional[int], typer.Option("--index", help="Numero de l'episode")] = None,
    width: Annotated[Optional[int], typer.Option("--width", help="Largeur du flux video")] = None,
    video_type: Annotated[
        VideoType, typer.Option("--video-type", help="Format du conteneur")
    ] = VideoType.VIDEO_FILE,
    format_3d: Annotated[Optional[str], typer.Option("--3d", help="Format 3D (ex: HSBS)")] = None,
    sources: Annotated[int, typer.Option("--sources", min=1, help="Nombre de sources")] = 1,
) -> None:
    """Enregistre un film ou un episode dans la videotheque."""
    if kind == MediaKind.MOVIE and not tmdb_id:
        console.print("[yellow]Film sans ID TMDB : il ne sera jamais regroupe.[/yellow]")

    container = Container()
    container.database.init()
    repo = container.library_repository()

    existing = repo.get_by_path(path)
    item = MediaItem(
        id=existing.id if existing else uuid.uuid4(),
        kind=kind,
        path=path,
        title=title,
        production_year=year,
        series_name=series,
        season_name=season,
        index_number=index,
        tmdb_id=tmdb_id,
        media_source_count=sources,
        video_type=video_type,
        video_3d_format=format_3d,
        default_stream_width=width,
    )
    if existing:
        item.primary_version_id = existing.primary_version_id
        item.linked_alternate_versions = existing.linked_alternate_versions

    saved = repo.save(item)
    action = "Mis a jour" if existing else "Ajoute"
    console.print(f"[green]{action}:[/green] {saved.display_name()} [dim]({saved.id.hex})[/dim]")


def list_items(
    kind: Annotated[MediaKind, typer.Option("--kind", "-k", help="Type d'element")] = MediaKind.MOVIE,
) -> None:
    """Affiche les elements de la videotheque avec leur role de version."""
    container = Container()
    container.database.init()
    repo = container.library_repository()

    items = repo.query(LibraryQuery(kind=kind, is_virtual=None))
    if not items:
        console.print("[yellow]Videotheque vide.[/yellow]")
        return

    table = Table(title=f"{len(items)} element(s)")
    table.add_column("ID", style="dim")
    table.add_column("Titre")
    table.add_column("Annee", justify="right")
    table.add_column("Chemin")
    table.add_column("Role")
    table.add_column("Liens", justify="right")

    for item in items:
        table.add_row(
            item.id.hex[:8],
            item.display_name(),
            str(item.production_year or ""),
            item.path,
            _ROLE_STYLES[item.role],
            str(len(item.linked_alternate_versions)),
        )

    console.print(table)
