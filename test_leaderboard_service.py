"""Tests for row normalization and the ranking policy."""

import asyncio
from datetime import datetime, timezone

import pytest

from leaderboard_api.datasources import CsvFileSource, LeaderboardSource
from leaderboard_api.services.leaderboard_service import (
    LeaderboardService,
    calculate_progress,
    format_updated_at,
    name_collation_key,
    parse_count,
    parse_redemption,
    strip_repeated_header,
)


class StaticSource(LeaderboardSource):
    """In-memory source returning fixed rows."""

    def __init__(self, rows, updated_at=None):
        self.rows = rows
        self.updated_at = updated_at or datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    async def read_rows(self):
        return list(self.rows)

    async def get_updated_at(self):
        return self.updated_at


def row(name, status="Yes", badges="0", arcade="0"):
    return {
        "User Name": name,
        "Access Code Redemption Status": status,
        "# of Skill Badges Completed": badges,
        "# of Arcade Games Completed": arcade,
    }


@pytest.mark.parametrize(
    "value, expected",
    [
        ("7", 7),
        (" 12 ", 12),
        ("12abc", 12),
        ("3.9", 3),
        ("+4", 4),
        ("", 0),
        ("abc", 0),
        (None, 0),
        ("-3", 0),
    ],
)
def test_parse_count(value, expected):
    assert parse_count(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("Yes", True), (" yes ", True), ("YES", True), ("No", False), ("", False), (None, False), ("y", False)],
)
def test_parse_redemption(value, expected):
    assert parse_redemption(value) is expected


def test_progress_rounds_half_up_and_caps():
    assert calculate_progress(0, 0) == 0
    assert calculate_progress(1, 0) == 5
    assert calculate_progress(19, 1) == 100
    assert calculate_progress(30, 5) == 100
    # 0.5 rounds up, not to even
    assert calculate_progress(1, 0, max_courses=8) == 13


def test_progress_handles_oversized_counts():
    assert calculate_progress(int("9" * 400), 1) == 100
    assert calculate_progress(19, 0) == 95


def test_progress_always_in_range():
    for badges in range(0, 50):
        for arcade in range(0, 5):
            assert 0 <= calculate_progress(badges, arcade) <= 100


def test_strip_repeated_header():
    rows = [row("User Name", "Access Code Redemption Status"), row("Ada")]
    assert [r["User Name"] for r in strip_repeated_header(rows)] == ["Ada"]
    assert strip_repeated_header([row("Ada")]) == [row("Ada")]
    assert strip_repeated_header([]) == []


def test_name_collation_ignores_case_and_accents_first():
    names = ["bob", "Émile", "alice", "Zoe", "emma"]
    assert sorted(names, key=name_collation_key) == ["alice", "bob", "Émile", "emma", "Zoe"]


def test_name_collation_lowercase_before_uppercase():
    assert sorted(["Ann", "ann"], key=name_collation_key) == ["ann", "Ann"]


def test_name_collation_punctuation_before_digits_before_letters():
    names = ["abe", "~tilde", "Zed", "1x", "_under"]
    assert sorted(names, key=name_collation_key) == ["_under", "~tilde", "1x", "abe", "Zed"]


def test_format_updated_at():
    ts = datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)
    assert format_updated_at(ts) == "2024-05-01T10:00:00.123Z"


def test_normalize_row_defaults():
    service = LeaderboardService(StaticSource([]))
    entry = service.normalize_row({})
    assert entry == {
        "name": "Unknown Name",
        "redemptionStatus": False,
        "skillBadges": 0,
        "arcadePoints": 0,
        "progress": 0,
        "skillBadgesStr": "0/19",
        "arcadePointsStr": "0/1",
    }


def test_normalize_row_display_totals_follow_config():
    service = LeaderboardService(StaticSource([]), skill_badge_total=15, arcade_game_total=3)
    entry = service.normalize_row(row("Ada", badges="4", arcade="2"))
    assert entry["skillBadgesStr"] == "4/15"
    assert entry["arcadePointsStr"] == "2/3"
    assert entry["progress"] == 30


def test_ranking_order():
    rows = [
        row("Nora", status="No", badges="19", arcade="1"),
        row("Ben", badges="5", arcade="0"),
        row("Cara", badges="5", arcade="1"),
        row("Abe", badges="5", arcade="1"),
        row("Dan", badges="9", arcade="0"),
    ]
    service = LeaderboardService(StaticSource(rows))
    board = service.rank_rows(rows)

    assert [e.name for e in board] == ["Dan", "Abe", "Cara", "Ben", "Nora"]
    assert [e.rank for e in board] == [1, 2, 3, 4, 5]
    assert board[-1].redemptionStatus is False


def test_ranking_is_stable_for_full_ties():
    # Composed and decomposed spellings collate identically
    composed, decomposed = "Ren\u00e9", "Rene\u0301"
    rows = [row(composed, badges="3"), row(decomposed, badges="3"), row("Ada", badges="3")]
    service = LeaderboardService(StaticSource(rows))

    assert [e.name for e in service.rank_rows(rows)] == ["Ada", composed, decomposed]
    assert [e.name for e in service.rank_rows(rows[1::-1])] == [decomposed, composed]


def test_rank_rows_drops_repeated_header():
    rows = [row("User Name", "Access Code Redemption Status", "x", "y"), row("Ada", badges="1")]
    board = LeaderboardService(StaticSource(rows)).rank_rows(rows)
    assert [e.name for e in board] == ["Ada"]


def test_get_leaderboard_response():
    rows = [row("Ada", badges="2"), row("Bo", badges="4")]
    service = LeaderboardService(StaticSource(rows))

    response = asyncio.run(service.get_leaderboard_response())

    assert response.success is True
    assert response.message == "Leaderboard data fetched successfully."
    assert response.updatedAt == "2024-05-01T10:00:00.000Z"
    assert [e.name for e in response.data] == ["Bo", "Ada"]


def test_get_leaderboard_missing_file(tmp_path):
    service = LeaderboardService(CsvFileSource(str(tmp_path / "missing.csv")))
    with pytest.raises(FileNotFoundError, match="CSV file not found at path"):
        asyncio.run(service.get_leaderboard())
