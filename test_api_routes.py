"""Tests for the HTTP routes."""

import httpx
import pytest
from fastapi.testclient import TestClient

from athlete_rank.app import create_app
from athlete_rank.config import Config
from athlete_rank.datasources import DocumentApiDataSource, InMemoryDataSource
from conftest import ATHLETE_A, ATHLETE_B, ATHLETE_C


@pytest.fixture
def datasource(results, accounts, profiles) -> InMemoryDataSource:
    return InMemoryDataSource(results, accounts.values(), profiles.values())


@pytest.fixture
def client(datasource):
    app = create_app(Config(), datasource_factory=lambda: datasource)
    with TestClient(app) as client:
        yield client


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_leaderboard_defaults_to_district_view(client):
    response = client.get("/v1/leaderboard")

    assert response.status_code == 200
    entries = response.json()
    assert [e["athleteId"] for e in entries] == [ATHLETE_A, ATHLETE_B, ATHLETE_C]
    assert [e["rank"] for e in entries] == [1, 2, 3]
    assert entries[0]["name"] == "Sam"


def test_leaderboard_unknown_view_shows_everyone(client):
    entries = client.get("/v1/leaderboard", params={"view": "planet"}).json()

    assert len(entries) == 3


def test_results_newest_first(client):
    results = client.get(f"/v1/results/{ATHLETE_B}").json()

    assert [r["score"] for r in results] == [95, 85]


def test_invalid_athlete_id_is_rejected(client):
    response = client.get("/v1/results/not-an-id")

    assert response.status_code == 400


def test_athlete_id_with_trailing_newline_is_rejected(client):
    response = client.get(f"/v1/results/{ATHLETE_A}%0A")

    assert response.status_code == 400


def test_summary(client):
    summary = client.get(f"/v1/athletes/{ATHLETE_B}/summary").json()

    assert summary["overallScore"] == 90
    assert summary["badge"] == "Gold"
    assert summary["yAxisDomain"] == [75, 100]


def test_summary_for_athlete_without_results(client):
    summary = client.get(f"/v1/athletes/{'d' * 24}/summary").json()

    assert summary["overallScore"] == 0
    assert summary["badge"] == "Bronze"
    assert summary["trendSeries"] == []


def test_profile(client):
    profile = client.get(f"/v1/athletes/{ATHLETE_A}").json()

    assert profile["identity"]["name"] == "Sam"
    assert profile["identity"]["district"] == "Ernakulam"
    assert profile["summary"]["bestScore"] == 90


def test_profile_not_found(client):
    response = client.get(f"/v1/athletes/{'d' * 24}")

    assert response.status_code == 404


def test_datasource_is_reused_and_released(client, datasource):
    client.get("/v1/leaderboard")
    client.get(f"/v1/results/{ATHLETE_A}")

    handle = client.app.state.datasource_handle
    assert handle.refs == 0
    assert handle.initialized


def test_store_failure_maps_to_bad_gateway():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    def factory():
        return DocumentApiDataSource(
            api_url="https://data.example.test/api",
            retry_delay=0,
            transport=httpx.MockTransport(handler),
        )

    with TestClient(create_app(Config(), datasource_factory=factory)) as client:
        response = client.get("/v1/leaderboard")

    assert response.status_code == 502
