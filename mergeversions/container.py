"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelLibraryRepository
from .services.eligibility import EligibilityFilter
from .services.link_reconciler import LinkReconciler
from .services.merge_versions import MergeVersionsManager


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        manager = container.merge_versions_manager()
        manager.merge_movies()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Adapters
    file_system = providers.Singleton(FileSystemAdapter)

    # Repository - Factory pour nouvelle instance avec session fraiche
    library_repository = providers.Factory(
        SQLModelLibraryRepository,
        session=session,
    )

    eligibility_filter = providers.Factory(
        EligibilityFilter,
        file_system=file_system,
        locations_excluded=config.provided.locations_excluded,
    )

    # Sessions distinctes : le gestionnaire ne fait que lire la liste initiale,
    # le reconciler relit chaque element avant de l'ecrire
    link_reconciler = providers.Factory(
        LinkReconciler,
        library_repo=library_repository,
    )

    merge_versions_manager = providers.Factory(
        MergeVersionsManager,
        library_repo=library_repository,
        eligibility_filter=eligibility_filter,
        reconciler=link_reconciler,
    )
