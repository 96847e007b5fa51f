import re
from datetime import datetime
from pathlib import Path

# YYYY-MM-DD anywhere in the base name
DATE_IN_FILENAME_RE = re.compile(r"(\d{4}-\d{2}-\d{2})")


def infer_date_from_filename(filename: str) -> str | None:
    """Extracts the note date from a daily-note file name.

    Example: "Daily 2025-01-14 standup.md" -> "2025-01-14"

    Args:
        filename: File name or path of the note.

    Returns:
        The first YYYY-MM-DD substring of the base name, verbatim,
        or None if there is none.
    """
    match = DATE_IN_FILENAME_RE.search(Path(filename).name)
    return match.group(1) if match else None


def now_iso_local(now: datetime | None = None) -> str:
    """Formats a timestamp as ISO 8601 in local time with an explicit offset.

    Example: 2025-01-14T09:30:00.123+01:00 (never a trailing "Z").

    Args:
        now: Optional timestamp to format; defaults to the current time.

    Returns:
        The timestamp with millisecond precision and a +HH:MM offset.
    """
    dt = (now or datetime.now()).astimezone()
    return dt.isoformat(timespec="milliseconds")
