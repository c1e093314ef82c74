"""
Routes de declenchement des passages merge/split.

Chaque declencheur repond immediatement 204 et lance le passage en
arriere-plan. Un seul passage peut tourner a la fois : un second
declenchement pendant l'execution repond 409. La progression (0-100) et le
bilan se consultent sur /MergeVersions/Progress.
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from loguru import logger

router = APIRouter(prefix="/MergeVersions")

# Operation -> methode du MergeVersionsManager
_OPERATIONS = {
    "MergeMovies": "merge_movies",
    "SplitMovies": "split_movies",
    "MergeEpisodes": "merge_episodes",
    "SplitEpisodes": "split_episodes",
}


class PassProgress:
    """État de progression partagé entre le passage et les routes."""

    def __init__(self, operation: str) -> None:
        self.operation: str = operation
        self.progress: int = 0
        self.running: bool = True
        self.cancel_requested: bool = False
        self.total: int = 0
        self.processed: int = 0
        self.failed: int = 0
        self.cancelled: bool = False
        self.error: Optional[str] = None

    def report(self, percent: int) -> None:
        """Callback de progression appele par le gestionnaire."""
        self.progress = percent

    def to_dict(self) -> dict:
        return {
            "operation": self.operation,
            "progress": self.progress,
            "running": self.running,
            "total": self.total,
            "processed": self.processed,
            "failed": self.failed,
            "cancelled": self.cancelled,
            "error": self.error,
        }


def _run_pass(container, progress: PassProgress) -> None:
    """Exécute un passage complet (sync, dans un thread)."""
    try:
        manager = container.merge_versions_manager()
        batch = getattr(manager, _OPERATIONS[progress.operation])
        report = batch(progress.report, lambda: progress.cancel_requested)
        progress.total = report.total
        progress.processed = report.processed
        progress.failed = report.failed
        progress.cancelled = report.cancelled
    except Exception as e:
        logger.exception(f"Echec du passage {progress.operation}: {e}")
        progress.error = str(e)
    finally:
        progress.running = False
        logger.info(f"Passage {progress.operation} termine")


def _start_pass(request: Request, operation: str) -> Response:
    """Lance un passage en arrière-plan s'il n'y en a pas déjà un en cours."""
    state = request.app.state
    existing: Optional[PassProgress] = getattr(state, "pass_progress", None)
    if existing and existing.running:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": f"Un passage est deja en cours ({existing.operation})"},
        )

    logger.info(f"Demarrage du passage {operation}")
    progress = PassProgress(operation)
    state.pass_progress = progress
    state.pass_task = asyncio.create_task(
        asyncio.to_thread(_run_pass, state.container, progress)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/MergeMovies", status_code=status.HTTP_204_NO_CONTENT)
async def merge_movies_request(request: Request):
    """Scanne tous les films et regroupe les doublons."""
    return _start_pass(request, "MergeMovies")


@router.post("/SplitMovies", status_code=status.HTTP_204_NO_CONTENT)
async def split_movies_request(request: Request):
    """Scanne tous les films et sépare les groupes existants."""
    return _start_pass(request, "SplitMovies")


@router.post("/MergeEpisodes", status_code=status.HTTP_204_NO_CONTENT)
async def merge_episodes_request(request: Request):
    """Scanne tous les épisodes et regroupe les doublons."""
    return _start_pass(request, "MergeEpisodes")


@router.post("/SplitEpisodes", status_code=status.HTTP_204_NO_CONTENT)
async def split_episodes_request(request: Request):
    """Scanne tous les épisodes et sépare les groupes existants."""
    return _start_pass(request, "SplitEpisodes")


@router.post("/Cancel", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_request(request: Request):
    """Demande l'arrêt du passage en cours avant le prochain groupe."""
    progress: Optional[PassProgress] = getattr(request.app.state, "pass_progress", None)
    if progress and progress.running:
        progress.cancel_requested = True
        logger.info(f"Interruption demandee pour {progress.operation}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/Progress")
async def progress_request(request: Request):
    """Progression et bilan du dernier passage."""
    progress: Optional[PassProgress] = getattr(request.app.state, "pass_progress", None)
    if progress is None:
        return {"operation": None, "progress": 0, "running": False}
    return progress.to_dict()
