import re
from pathlib import Path

import structlog

from raisehand.models import Event
from raisehand.parsers import (
    is_fence,
    is_heading,
    is_tag_line,
    parse_team_and_winner,
)
from raisehand.utils.date_and_time import infer_date_from_filename

logger = structlog.get_logger(__name__)

LINE_SPLIT_RE = re.compile(r"\r?\n")


def _capture_block(
    lines: list[str], start: int, date: str | None, file: str
) -> list[Event]:
    """Collects winners from the lines following a tag line.

    Leading blank lines are skipped. Once a winner has been captured, the
    first blank line, heading or code fence ends the block. A heading or
    fence before any winner ends the block empty. Another tag line always
    ends the block without being consumed.

    Args:
        lines: All lines of the note.
        start: Index of the first line after the tag line.
        date: Date inferred from the note's file name.
        file: Base name of the note.

    Returns:
        The events captured in this block, in line order.
    """
    events: list[Event] = []

    for line in lines[start:]:
        if is_tag_line(line):
            break

        stripped = line.strip()
        if events:
            if not stripped or is_heading(stripped) or is_fence(stripped):
                break
        else:
            if not stripped:
                continue
            if is_heading(stripped) or is_fence(stripped):
                break

        parsed = parse_team_and_winner(line)
        if parsed is None:
            continue

        events.append(
            Event(date=date, team=parsed.team, winner=parsed.winner, file=file)
        )

    return events


def extract_events(content: str, filename: str) -> list[Event]:
    """Extracts all winner events from the content of one note.

    Every line carrying the ``#raise-hand-winner`` tag opens a capture block
    over the lines that follow it; text on the tag line itself is ignored.

    Args:
        content: Full text of the note.
        filename: Name or path of the note (only the base name is kept).

    Returns:
        Events in the order their lines appear in the note.
    """
    file = Path(filename).name
    date = infer_date_from_filename(file)
    lines = LINE_SPLIT_RE.split(content)

    events: list[Event] = []
    for i, line in enumerate(lines):
        if not is_tag_line(line):
            continue

        block = _capture_block(lines, i + 1, date, file)
        if not block:
            logger.warning("tag_without_winners", file=file, line=i + 1)
        events.extend(block)

    return events
