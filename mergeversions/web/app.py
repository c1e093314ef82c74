"""
Application FastAPI de MergeVersions.

Initialise l'application web avec le Container DI et monte les routes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..container import Container
from .routes.merge_versions import router as merge_versions_router


def create_app(container=None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI a utiliser (un Container neuf si None)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise le Container DI au démarrage."""
        if container is None:
            app.state.container = Container()
            app.state.container.database.init()
        else:
            app.state.container = container
        yield

    application = FastAPI(title="MergeVersions", lifespan=lifespan)
    application.include_router(merge_versions_router)
    return application


app = create_app()
