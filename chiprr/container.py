"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import CatalogCache
from .adapters.api.tmdb_client import TMDBClient
from .adapters.file_system import FileSystemAdapter
from .adapters.ignore_filter import IgnoreFilter
from .config import Settings
from .services.organizer import OrganizerService
from .services.path_parser import PathParserService
from .services.scanner import ScannerService
from .services.show_matcher import ShowMatcherService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.config.override(providers.Object(settings))  # options CLI
        organizer = container.organizer_service(dry_run=True)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    ignore_filter = providers.Singleton(IgnoreFilter)

    # Cache API - Singleton partage par toutes les recherches
    catalog_cache = providers.Singleton(
        CatalogCache,
        cache_dir=config.provided.cache_dir,
    )

    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_token,
        cache=catalog_cache,
    )

    # Services (stateless - Singletons)
    path_parser = providers.Singleton(PathParserService)
    show_matcher = providers.Singleton(
        ShowMatcherService,
        lookup=tmdb_client.provided.search_show,
    )

    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        ignore_filter=ignore_filter,
    )

    # Factory car depend du repertoire de rangement et du mode dry-run
    # Utiliser: container.organizer_service(dry_run=True/False)
    organizer_service = providers.Factory(
        OrganizerService,
        parser=path_parser,
        matcher=show_matcher,
        file_system=file_system,
        sorted_dir=config.provided.sorted_dir,
    )
