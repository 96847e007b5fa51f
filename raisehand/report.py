"""Plain-text leaderboard report.

Renders stored output (see ``Storage.load``) for a terminal. Rows with the
same number of wins share a rank (1, 2, 2, 4).
"""

from raisehand.models import LeaderboardRow
from raisehand.storage import StoredOutput


def rank_rows(rows: list[LeaderboardRow]) -> list[tuple[int, LeaderboardRow]]:
    """Assign competition ranks to rows already sorted by wins."""
    ranked: list[tuple[int, LeaderboardRow]] = []
    for position, row in enumerate(rows, start=1):
        if ranked and ranked[-1][1].wins == row.wins:
            ranked.append((ranked[-1][0], row))
        else:
            ranked.append((position, row))
    return ranked


def format_report(stored: StoredOutput, top: int = 0) -> list[str]:
    """Builds the report lines.

    Args:
        stored: Loaded events, leaderboard and metadata.
        top: Maximum number of rows to show; 0 shows all rows.

    Returns:
        Lines of text, without trailing newlines.
    """
    ranked = rank_rows(stored.leaderboard)
    if top:
        ranked = ranked[:top]

    lines = [
        f"Last updated: {stored.meta.last_updated}",
        f"Events: {len(stored.events)}, Winners: {len(stored.leaderboard)}",
    ]
    if not ranked:
        lines.append("No winners recorded.")
        return lines

    team_width = max(len("Team"), *(len(row.team) for _, row in ranked))
    winner_width = max(len("Winner"), *(len(row.winner) for _, row in ranked))

    lines.append(f"{'#':>4}  {'Team':<{team_width}}  {'Winner':<{winner_width}}  Wins")
    for rank, row in ranked:
        lines.append(
            f"{rank:>4}  {row.team:<{team_width}}  {row.winner:<{winner_width}}  {row.wins}"
        )
    return lines
