"""Commandes CLI merge/split : regroupement et separation des versions."""

from typing import Annotated

import typer

from mergeversions.adapters.cli.helpers import console, run_with_progress
from mergeversions.container import Container
from mergeversions.services.merge_versions import BatchReport

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Afficher les logs pendant le passage"),
]


def _display_report(report: BatchReport, unit: str) -> None:
    """Affiche le bilan d'un passage."""
    if report.total == 0:
        console.print(f"[yellow]Aucun {unit} a traiter.[/yellow]")
        return

    console.print(f"\n[bold]Traites:[/bold] {report.processed}/{report.total} {unit}(s)")
    if report.failed:
        console.print(f"[red]Echecs:[/red] {report.failed} (voir les logs)")
    if report.cancelled:
        console.print("[yellow]Passage interrompu avant la fin.[/yellow]")


def _manager():
    """Cree le gestionnaire de versions avec une base initialisee."""
    container = Container()
    container.database.init()
    return container.merge_versions_manager()


def merge_movies(verbose: VerboseOption = False) -> None:
    """Regroupe les films presents en plusieurs versions (meme ID TMDB)."""
    manager = _manager()
    console.print("[bold cyan]Recherche des films en plusieurs versions[/bold cyan]")
    report = run_with_progress("Regroupement...", manager.merge_movies, not verbose)
    _display_report(report, "groupe")


def split_movies(verbose: VerboseOption = False) -> None:
    """Separe tous les films regroupes en versions independantes."""
    manager = _manager()
    console.print("[bold cyan]Separation de tous les films[/bold cyan]")
    report = run_with_progress("Separation...", manager.split_movies, not verbose)
    _display_report(report, "film")


def merge_episodes(verbose: VerboseOption = False) -> None:
    """Regroupe les episodes presents en plusieurs versions."""
    manager = _manager()
    console.print("[bold cyan]Recherche des episodes en plusieurs versions[/bold cyan]")
    report = run_with_progress("Regroupement...", manager.merge_episodes, not verbose)
    _display_report(report, "groupe")


def split_episodes(verbose: VerboseOption = False) -> None:
    """Separe tous les episodes regroupes en versions independantes."""
    manager = _manager()
    console.print("[bold cyan]Separation de tous les episodes[/bold cyan]")
    report = run_with_progress("Separation...", manager.split_episodes, not verbose)
    _display_report(report, "episode")
