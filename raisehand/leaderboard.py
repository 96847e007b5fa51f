from collections.abc import Iterable

from raisehand.models import Event, LeaderboardRow
from raisehand.parsers import DEFAULT_TEAM


def build_leaderboard_rows(events: Iterable[Event]) -> tuple[LeaderboardRow, ...]:
    """Counts wins per (team, winner) pair.

    Rows are sorted by wins (descending), then team, then winner, so the
    result does not depend on the order of the input events.

    Args:
        events: Extracted events from all notes.

    Returns:
        One row per distinct (team, winner) pair.
    """
    # team -> winner -> wins
    counts: dict[str, dict[str, int]] = {}

    for event in events:
        team = (event.team or DEFAULT_TEAM).upper()
        winners = counts.setdefault(team, {})
        winners[event.winner] = winners.get(event.winner, 0) + 1

    rows = [
        LeaderboardRow(team=team, winner=winner, wins=wins)
        for team, winners in counts.items()
        for winner, wins in winners.items()
    ]
    rows.sort(key=lambda r: (-r.wins, r.team, r.winner))
    return tuple(rows)
