from dataclasses import dataclass
from typing import NamedTuple, TypedDict


class EventDict(TypedDict):
    date: str | None
    team: str
    winner: str
    file: str


class LeaderboardRowDict(TypedDict):
    team: str
    winner: str
    wins: int


class MetaDict(TypedDict):
    lastUpdated: str


class TeamWinner(NamedTuple):
    """Result of parsing a single winner line."""

    team: str
    winner: str


@dataclass(frozen=True)
class Event:
    """
    One winner observation extracted from a tagged block in a note.

    Date format: ISO 8601 (YYYY-MM-DD), taken verbatim from the file name.
    """

    date: str | None  # None when the file name carries no date
    team: str  # Always uppercase
    winner: str  # Normalized free text, never empty
    file: str  # Base name of the source note

    def to_dict(self) -> EventDict:
        return {
            "date": self.date,
            "team": self.team,
            "winner": self.winner,
            "file": self.file,
        }

    @classmethod
    def from_dict(cls, data: EventDict) -> "Event":
        return cls(
            date=data.get("date"),
            team=data["team"],
            winner=data["winner"],
            file=data["file"],
        )


@dataclass(frozen=True)
class LeaderboardRow:
    """Aggregated win count for one (team, winner) pair."""

    team: str
    winner: str
    wins: int

    def to_dict(self) -> LeaderboardRowDict:
        return {"team": self.team, "winner": self.winner, "wins": self.wins}

    @classmethod
    def from_dict(cls, data: LeaderboardRowDict) -> "LeaderboardRow":
        return cls(team=data["team"], winner=data["winner"], wins=int(data["wins"]))


@dataclass(frozen=True)
class Meta:
    """
    Run metadata written next to the event and leaderboard files.

    last_updated: local time with explicit UTC offset
    (e.g. 2025-01-14T09:30:00.123+01:00).
    """

    last_updated: str

    def to_dict(self) -> MetaDict:
        return {"lastUpdated": self.last_updated}

    @classmethod
    def from_dict(cls, data: MetaDict) -> "Meta":
        return cls(last_updated=data["lastUpdated"])
