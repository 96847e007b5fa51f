"""Line-level parsing for raise-hand winner notes.

Provides:
- ``is_tag_line`` - detects the ``#raise-hand-winner`` marker as its own token.
- ``is_heading`` / ``is_fence`` - structural lines that end a capture block.
- ``parse_team_and_winner`` - turns one winner line into a ``TeamWinner``.

Accepted winner line shapes
---------------------------
``ZC - Christy``, ``ZC: Christy``, ``ZC—Christy``, ``GAMEON – Kimmy``
    Team prefix (2-20 word characters) and a separator, uppercased team.
``- Kimmy``
    No prefix; the winner is credited to ``DEFAULT_TEAM``.
"""

import re

from raisehand.models import TeamWinner

TAG = "#raise-hand-winner"
DEFAULT_TEAM = "GAMEON"

# The marker must be delimited by whitespace or line boundaries
# ("foo#raise-hand-winner" and "#raise-hand-winnerbar" do not count).
TAG_TOKEN_RE = re.compile(r"(?:^|\s)" + re.escape(TAG) + r"(?:\s|$)")

HEADING_RE = re.compile(r"^#+\s+")
FENCE_RE = re.compile(r"^```")

# Separators: hyphen, colon, en dash, em dash
TEAM_NAME_RE = re.compile(r"^([A-Za-z0-9_]{2,20})\s*[-:–—]\s*(.+)$")

BULLET_RE = re.compile(r"^[-*+]\s+")
WHITESPACE_RUN_RE = re.compile(r"\s{2,}")

# Placeholders left behind in note templates, checked after normalization.
MEANINGLESS_LINES: frozenset[str] = frozenset(
    {"-", "*", "+", "[]", "[ ]", "- [ ]", "* [ ]"}
)


def is_tag_line(line: str) -> bool:
    """Check if a raw line carries the winner tag as a standalone token."""
    return TAG_TOKEN_RE.search(line) is not None


def is_heading(stripped: str) -> bool:
    return HEADING_RE.match(stripped) is not None


def is_fence(stripped: str) -> bool:
    return FENCE_RE.match(stripped) is not None


def normalize_winner_line(line: str) -> str:
    """Strips one bullet marker and collapses repeated whitespace.

    Args:
        line: The raw line as read from the note.

    Returns:
        The trimmed line without its bullet prefix.
    """
    s = BULLET_RE.sub("", line.strip(), count=1)
    return WHITESPACE_RUN_RE.sub(" ", s).strip()


def is_meaningless_line(s: str) -> bool:
    """Check if a normalized line is empty or a template placeholder."""
    t = s.strip()
    return not t or t in MEANINGLESS_LINES


def parse_team_and_winner(line: str) -> TeamWinner | None:
    """Parses a winner line into its team and winner parts.

    The team prefix pattern is tried first; lines without one are credited
    to ``DEFAULT_TEAM`` with the whole normalized line as the winner.

    Args:
        line: The raw line as read from the note.

    Returns:
        A ``TeamWinner``, or None if the line holds no winner.
    """
    s = normalize_winner_line(line)
    if is_meaningless_line(s):
        return None

    match = TEAM_NAME_RE.match(s)
    if match:
        team = match.group(1).strip().upper()
        winner = match.group(2).strip()
        if not winner:
            return None
        return TeamWinner(team=team, winner=winner)

    return TeamWinner(team=DEFAULT_TEAM, winner=s)
