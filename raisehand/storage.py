import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, NamedTuple

import structlog

from .exceptions import StorageError
from .models import Event, LeaderboardRow, Meta

logger = structlog.get_logger(__name__)

EVENTS_FILE = "events.json"
LEADERBOARD_FILE = "leaderboard.json"
META_FILE = "meta.json"


class StoredOutput(NamedTuple):
    events: list[Event]
    leaderboard: list[LeaderboardRow]
    meta: Meta


class Storage:
    """Handles writing and reading the dashboard data files.

    The output directory holds three files that are rewritten on every run:
    events.json (raw events), leaderboard.json (aggregated rows) and
    meta.json (last update timestamp). Nothing from a previous run is merged.
    """

    def __init__(self, output_dir: str):
        """Initializes the Storage instance.

        Args:
            output_dir: Directory receiving the JSON files (e.g. 'site/data').
        """
        self.output_dir = Path(output_dir)
        self.events_file = self.output_dir / EVENTS_FILE
        self.leaderboard_file = self.output_dir / LEADERBOARD_FILE
        self.meta_file = self.output_dir / META_FILE

    def _write_json(self, path: Path, data: Any) -> None:
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}", path=str(path)) from e

    def _read_json(self, path: Path) -> Any:
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise StorageError(
                f"Output file not found: {path}",
                path=str(path),
                suggestion="Run 'raisehand' first to generate the data files.",
            ) from e
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}", path=str(path)) from e

    def save(
        self,
        events: Sequence[Event],
        rows: Sequence[LeaderboardRow],
        meta: Meta,
    ) -> list[Path]:
        """Writes events, leaderboard rows and metadata, overwriting old files.

        Args:
            events: All extracted events, in discovery order.
            rows: Sorted leaderboard rows.
            meta: Run metadata.

        Returns:
            The paths of the written files.

        Raises:
            StorageError: If the directory or a file cannot be written.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Cannot create output directory {self.output_dir}: {e}",
                path=str(self.output_dir),
            ) from e

        self._write_json(self.events_file, [e.to_dict() for e in events])
        logger.info("events_written", count=len(events), path=str(self.events_file))

        self._write_json(self.leaderboard_file, [r.to_dict() for r in rows])
        logger.info(
            "leaderboard_written", count=len(rows), path=str(self.leaderboard_file)
        )

        self._write_json(self.meta_file, meta.to_dict())
        logger.info(
            "meta_written", last_updated=meta.last_updated, path=str(self.meta_file)
        )

        return [self.events_file, self.leaderboard_file, self.meta_file]

    def load(self) -> StoredOutput:
        """Loads the three data files from the output directory.

        Returns:
            The stored events, leaderboard rows and metadata.

        Raises:
            StorageError: If a file is missing or not valid JSON.
        """
        events = [Event.from_dict(e) for e in self._read_json(self.events_file)]
        rows = [
            LeaderboardRow.from_dict(r) for r in self._read_json(self.leaderboard_file)
        ]
        meta = Meta.from_dict(self._read_json(self.meta_file))
        return StoredOutput(events=events, leaderboard=rows, meta=meta)
