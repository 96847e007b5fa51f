import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import click
import structlog

from raisehand.exceptions import ConfigurationError, RaiseHandError, StorageError
from raisehand.leaderboard import build_leaderboard_rows
from raisehand.models import Meta
from raisehand.report import format_report
from raisehand.sources.markdown_source import MarkdownSource
from raisehand.storage import Storage
from raisehand.utils.date_and_time import now_iso_local

logger = structlog.get_logger(__name__)

# Configuration
DEFAULT_SOURCE_DIR = os.path.expanduser("~/Documents/Obsidian Vault/Work/Daily Notes")
DEFAULT_OUTPUT_DIR = os.path.join("site", "data")
SOURCE_DIR_ENVVAR = "RAISEHAND_SOURCE_DIR"
OUTPUT_DIR_ENVVAR = "RAISEHAND_OUTPUT_DIR"


@dataclass
class RunSummary:
    files: int
    events: int
    rows: int
    paths: list[Path] = field(default_factory=list)


def configure_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Routes structlog through the stdlib root logger."""
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def run(source_dir: str, output_dir: str, now: datetime | None = None) -> RunSummary:
    """Scans the notes, aggregates the winners and writes the data files.

    Output is only written after every note has been processed.

    Args:
        source_dir: Root directory of the markdown notes.
        output_dir: Directory receiving events.json, leaderboard.json and meta.json.
        now: Optional timestamp for meta.json (defaults to the current time).

    Returns:
        Counts of files, events and leaderboard rows, and the written paths.

    Raises:
        ConfigurationError: If source_dir is not an existing directory.
        StorageError: If the output cannot be written.
    """
    if not os.path.isdir(source_dir):
        raise ConfigurationError(
            f"Source directory does not exist: {source_dir}",
            parameter="SOURCE_DIR",
            path=source_dir,
        )

    source = MarkdownSource(source_dir)
    files = source.list_files()
    logger.info("markdown_files_found", count=len(files), source_dir=source_dir)

    events = source.load_events(files)
    rows = build_leaderboard_rows(events)
    meta = Meta(last_updated=now_iso_local(now))

    paths = Storage(output_dir).save(events, rows, meta)
    return RunSummary(files=len(files), events=len(events), rows=len(rows), paths=paths)


@click.command()
@click.argument(
    "source_dir", required=False, envvar=SOURCE_DIR_ENVVAR, default=DEFAULT_SOURCE_DIR
)
@click.argument(
    "output_dir", required=False, envvar=OUTPUT_DIR_ENVVAR, default=DEFAULT_OUTPUT_DIR
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-file", default=None, help="Also write log output to this file")
def main(source_dir, output_dir, verbose, log_file):
    """Build raise-hand winner data from markdown notes.

    SOURCE_DIR is the root of the notes vault, OUTPUT_DIR receives
    events.json, leaderboard.json and meta.json.
    """
    configure_logging(verbose, log_file)
    logger.info("run_started", source_dir=source_dir, output_dir=output_dir)

    try:
        summary = run(source_dir, output_dir)
    except RaiseHandError as e:
        logger.error("run_failed", **e.to_dict())
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    logger.info(
        "run_completed", files=summary.files, events=summary.events, rows=summary.rows
    )


@click.command()
@click.argument(
    "output_dir", required=False, envvar=OUTPUT_DIR_ENVVAR, default=DEFAULT_OUTPUT_DIR
)
@click.option(
    "--top",
    default=10,
    show_default=True,
    type=click.IntRange(min=0),
    help="Number of leaderboard rows to show (0 for all)",
)
def report(output_dir, top):
    """Print the leaderboard stored in OUTPUT_DIR."""
    try:
        stored = Storage(output_dir).load()
    except StorageError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    for line in format_report(stored, top):
        click.echo(line)


if __name__ == "__main__":
    main()
