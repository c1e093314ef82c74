"""
Utilitaires partages pour les commandes CLI de MergeVersions.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- run_with_progress : execute un passage avec une barre de progression Rich
"""

from collections.abc import Callable
from contextlib import contextmanager

from loguru import logger as loguru_logger
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from mergeversions.services.merge_versions import BatchReport, ProgressSink

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("mergeversions")
    try:
        yield
    finally:
        loguru_logger.enable("mergeversions")


def run_with_progress(
    description: str,
    batch: Callable[[ProgressSink], BatchReport],
    quiet_logs: bool = True,
) -> BatchReport:
    """
    Execute un passage en affichant sa progression (0-100).

    Args:
        description: Libelle de la barre de progression
        batch: Passage a executer, recoit le callback de progression
        quiet_logs: Masquer les logs loguru pendant l'affichage

    Returns:
        Le bilan du passage
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task(f"[cyan]{description}", total=100)

        def on_progress(percent: int) -> None:
            progress.update(task, completed=percent)

        if quiet_logs:
            with suppress_loguru():
                report = batch(on_progress)
        else:
            report = batch(on_progress)

        progress.update(task, description="[green]Termine")

    return report
