import json
from pathlib import Path

import pytest

from raisehand.exceptions import StorageError
from raisehand.models import Event, LeaderboardRow, Meta
from raisehand.storage import Storage

EVENTS = [
    Event(date="2025-01-14", team="ZC", winner="Christy", file="2025-01-14.md"),
    Event(date=None, team="GAMEON", winner="Zoë", file="Ideas.md"),
]
ROWS = (
    LeaderboardRow(team="GAMEON", winner="Zoë", wins=1),
    LeaderboardRow(team="ZC", winner="Christy", wins=1),
)
META = Meta(last_updated="2025-01-14T09:30:00.123+01:00")


def test_save_writes_three_files(output_dir: Path) -> None:
    storage = Storage(str(output_dir))
    paths = storage.save(EVENTS, ROWS, META)

    assert [p.name for p in paths] == ["events.json", "leaderboard.json", "meta.json"]
    assert output_dir.is_dir()

    with open(output_dir / "events.json", encoding="utf-8") as f:
        assert json.load(f) == [
            {"date": "2025-01-14", "team": "ZC", "winner": "Christy", "file": "2025-01-14.md"},
            {"date": None, "team": "GAMEON", "winner": "Zoë", "file": "Ideas.md"},
        ]
    with open(output_dir / "leaderboard.json", encoding="utf-8") as f:
        assert json.load(f)[1] == {"team": "ZC", "winner": "Christy", "wins": 1}
    with open(output_dir / "meta.json", encoding="utf-8") as f:
        assert json.load(f) == {"lastUpdated": "2025-01-14T09:30:00.123+01:00"}


def test_save_is_pretty_printed(output_dir: Path) -> None:
    Storage(str(output_dir)).save(EVENTS, ROWS, META)
    text = (output_dir / "meta.json").read_text(encoding="utf-8")

    assert text == '{\n  "lastUpdated": "2025-01-14T09:30:00.123+01:00"\n}\n'
    assert "Zoë" in (output_dir / "events.json").read_text(encoding="utf-8")


def test_save_overwrites_previous_output(output_dir: Path) -> None:
    storage = Storage(str(output_dir))
    storage.save(EVENTS, ROWS, META)
    storage.save([], (), Meta(last_updated="2025-01-15T08:00:00.000+01:00"))

    stored = storage.load()
    assert stored.events == []
    assert stored.leaderboard == []
    assert stored.meta.last_updated == "2025-01-15T08:00:00.000+01:00"


def test_round_trip(output_dir: Path) -> None:
    storage = Storage(str(output_dir))
    storage.save(EVENTS, ROWS, META)

    stored = storage.load()
    assert stored.events == EVENTS
    assert stored.leaderboard == list(ROWS)
    assert stored.meta == META


def test_load_missing_output(tmp_path: Path) -> None:
    with pytest.raises(StorageError) as exc_info:
        Storage(str(tmp_path / "nothing")).load()

    assert exc_info.value.path == str(tmp_path / "nothing" / "events.json")
    assert "raisehand" in str(exc_info.value)


def test_load_invalid_json(output_dir: Path) -> None:
    storage = Storage(str(output_dir))
    storage.save(EVENTS, ROWS, META)
    (output_dir / "leaderboard.json").write_text("[{", encoding="utf-8")

    with pytest.raises(StorageError):
        storage.load()


def test_save_into_file_path_fails(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(StorageError) as exc_info:
        Storage(str(blocker / "data")).save(EVENTS, ROWS, META)

    assert exc_info.value.to_dict()["error_type"] == "StorageError"
