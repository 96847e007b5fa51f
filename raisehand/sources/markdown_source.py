import os

import structlog

from raisehand.extractor import extract_events
from raisehand.models import Event

logger = structlog.get_logger(__name__)

MARKDOWN_EXTENSION = ".md"


class MarkdownSource:
    """Source for winner events embedded in a tree of markdown notes."""

    def __init__(self, base_dir: str):
        """Initializes the MarkdownSource.

        Args:
            base_dir: Root directory of the notes vault.
        """
        self.base_dir = base_dir

    def _on_walk_error(self, error: OSError) -> None:
        logger.warning(
            "directory_unreadable", path=error.filename, error=error.strerror
        )

    def list_files(self) -> list[str]:
        """Recursively lists markdown files under base_dir.

        Directories that cannot be listed are skipped with a warning. Only
        regular files are returned (FIFOs and sockets named *.md are ignored).
        Entries are visited in name order so results are reproducible.

        Returns:
            Paths of every file whose name ends with ".md" (any case).
        """
        files: list[str] = []
        for root, dirs, names in os.walk(self.base_dir, onerror=self._on_walk_error):
            dirs.sort()
            for name in sorted(names):
                path = os.path.join(root, name)
                if name.lower().endswith(MARKDOWN_EXTENSION) and os.path.isfile(path):
                    files.append(path)
        return files

    def extract_file(self, file_path: str) -> list[Event]:
        """Reads one note and extracts its events.

        Args:
            file_path: Path to the markdown file.

        Returns:
            The events found in the note, or an empty list if it cannot be read.
        """
        try:
            # utf-8-sig: a leading BOM is not part of the first line
            with open(file_path, encoding="utf-8-sig", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("file_unreadable", path=file_path, error=str(e))
            return []

        events = extract_events(content, file_path)
        if events:
            logger.debug("events_extracted", path=file_path, count=len(events))
        return events

    def load_events(self, files: list[str] | None = None) -> list[Event]:
        """Extracts events from every note, concatenated in discovery order.

        Args:
            files: Optional pre-computed file list (defaults to list_files()).

        Returns:
            All events found under base_dir.
        """
        if files is None:
            files = self.list_files()

        events: list[Event] = []
        for file_path in files:
            events.extend(self.extract_file(file_path))

        logger.info("events_loaded", count=len(events), files=len(files))
        return events
