"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from leaderboard_api.app import create_app
from leaderboard_api.config import Config

HEADER = (
    "User Name,User Email,Access Code Redemption Status,"
    "# of Skill Badges Completed,# of Arcade Games Completed\n"
)


@pytest.fixture
def write_csv(tmp_path):
    """Write a CSV export with the standard header plus the given lines."""
    def _write(lines: list[str], header: str = HEADER, name: str = "abc.csv"):
        path = tmp_path / name
        path.write_text(header + "".join(line + "\n" for line in lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_client():
    """Build a TestClient for an app reading the given CSV path."""
    clients = []

    def _make(csv_path, **overrides) -> TestClient:
        config = Config(csv_path=str(csv_path), **overrides)
        client = TestClient(create_app(config))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
