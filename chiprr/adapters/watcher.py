"""
Surveillance du repertoire d'entree avec watchdog.

L'observer watchdog tourne dans son propre thread : chaque fichier cree ou
deplace dans le repertoire surveille est transmis a la boucle asyncio via
asyncio.run_coroutine_threadsafe. Les fichiers deja presents au demarrage
ne sont pas traites.
"""

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from loguru import logger
from watchdog.events import (
    DirCreatedEvent,
    DirMovedEvent,
    FileCreatedEvent,
    FileMovedEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

FileCallback = Callable[[Path], Awaitable[Any]]


class NewFileEventHandler(FileSystemEventHandler):
    """Transmet les fichiers crees ou deplaces a un callback (thread watchdog)."""

    def __init__(self, on_new_file: Callable[[Path], None]) -> None:
        super().__init__()
        self._on_new_file = on_new_file

    def on_created(self, event: DirCreatedEvent | FileCreatedEvent) -> None:
        if not event.is_directory:
            self._on_new_file(Path(str(event.src_path)))

    def on_moved(self, event: DirMovedEvent | FileMovedEvent) -> None:
        if not event.is_directory:
            self._on_new_file(Path(str(event.dest_path)))


class DirectoryWatcher:
    """
    Surveille un repertoire et traite chaque nouveau fichier.

    Example:
        watcher = DirectoryWatcher(organize_if_candidate)
        await watcher.run(Path("/downloads"))  # jusqu'a annulation
    """

    def __init__(
        self,
        on_new_file: FileCallback,
        max_concurrency: int = 4,
        observer_factory: Callable[[], Any] = Observer,
    ) -> None:
        """
        Args:
            on_new_file: Coroutine appelee pour chaque nouveau fichier
            max_concurrency: Nombre maximum de fichiers traites simultanement
            observer_factory: Fabrique de l'observer watchdog
        """
        self._on_new_file = on_new_file
        self._max_concurrency = max(1, max_concurrency)
        self._observer_factory = observer_factory
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._semaphore = asyncio.Semaphore(self._max_concurrency)

    def _submit(self, path: Path) -> None:
        """Appele depuis le thread watchdog."""
        if self._loop is None or self._loop.is_closed():
            return
        logger.debug(f"Nouveau fichier detecte : {path}")
        asyncio.run_coroutine_threadsafe(self._process(path), self._loop)

    async def _process(self, path: Path) -> None:
        async with self._semaphore:
            try:
                await self._on_new_file(path)
            except Exception as e:
                logger.error(f"Erreur lors du traitement de {path} : {e}")
                logger.opt(exception=e).debug("Trace de l'erreur")

    async def run(self, directory: Path) -> None:
        """
        Surveille directory (recursivement) jusqu'a annulation de la tache.

        Args:
            directory: Repertoire a surveiller
        """
        self._loop = asyncio.get_running_loop()

        observer = self._observer_factory()
        observer.schedule(NewFileEventHandler(self._submit), str(directory), recursive=True)
        observer.start()
        logger.info(f"Surveillance de {directory} demarree")
        try:
            while True:
                await asyncio.sleep(3600)
        finally:
            observer.stop()
            observer.join()
            logger.info(f"Surveillance de {directory} arretee")
