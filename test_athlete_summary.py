"""Tests for athlete summary statistics and the athlete service."""

import pytest

from athlete_rank.datasources import InMemoryDataSource
from athlete_rank.models import Badge
from athlete_rank.services import AthleteService, badge_for, summarize_athlete
from conftest import ATHLETE_A, ATHLETE_B, make_result


def test_two_results_summary():
    summary = summarize_athlete([make_result(ATHLETE_A, 50, day=0), make_result(ATHLETE_A, 90, day=1)])

    assert summary.overallScore == 70
    assert summary.badge == Badge.SILVER
    assert summary.bestScore == 90
    assert summary.yAxisDomain == (40, 100)


def test_empty_summary():
    summary = summarize_athlete([])

    assert summary.overallScore == 0
    assert summary.badge == Badge.BRONZE
    assert summary.yAxisDomain == (0, 100)
    assert summary.trendSeries == []
    assert summary.distribution == {}
    assert summary.bestScore == 0
    assert summary.lastTestAt is None


@pytest.mark.parametrize("score, badge", [
    (100, Badge.GOLD),
    (80, Badge.GOLD),
    (79, Badge.SILVER),
    (60, Badge.SILVER),
    (59, Badge.BRONZE),
    (0, Badge.BRONZE),
])
def test_badge_boundaries(score, badge):
    assert badge_for(score) == badge


def test_badge_uses_rounded_score():
    # 79.5 rounds up into Gold
    summary = summarize_athlete([make_result(ATHLETE_A, 79), make_result(ATHLETE_A, 80, day=1)])

    assert summary.overallScore == 80
    assert summary.badge == Badge.GOLD


def test_trend_is_chronological_whatever_the_input_order():
    newest_first = [
        make_result(ATHLETE_A, 30, day=2),
        make_result(ATHLETE_A, 20, day=1),
        make_result(ATHLETE_A, 10, day=0),
    ]

    for ordering in (newest_first, list(reversed(newest_first))):
        summary = summarize_athlete(ordering)
        assert [p.score for p in summary.trendSeries] == [10, 20, 30]
        assert summary.lastTestAt == newest_first[0].createdAt


def test_domain_is_clamped():
    summary = summarize_athlete([make_result(ATHLETE_A, 5), make_result(ATHLETE_A, 97, day=1)])

    assert summary.yAxisDomain == (0, 100)


def test_domain_pads_both_sides():
    summary = summarize_athlete([make_result(ATHLETE_A, 55), make_result(ATHLETE_A, 65, day=1)])

    assert summary.yAxisDomain == (45, 75)


def test_distribution_skips_empty_exercise():
    summary = summarize_athlete([
        make_result(ATHLETE_A, 50, exercise="sprint"),
        make_result(ATHLETE_A, 60, day=1, exercise="sprint"),
        make_result(ATHLETE_A, 70, day=2, exercise="situps"),
        make_result(ATHLETE_A, 80, day=3, exercise=""),
    ])

    assert summary.distribution == {"sprint": 2, "situps": 1}


def test_invalid_scores_count_as_zero():
    summary = summarize_athlete([make_result(ATHLETE_A, "n/a"), make_result(ATHLETE_A, 80, day=1)])

    assert summary.overallScore == 40
    assert summary.trendSeries[0].score == 0


@pytest.mark.asyncio
async def test_service_summary_only_uses_the_athletes_results(results):
    service = AthleteService(InMemoryDataSource(results))

    summary = await service.get_summary(ATHLETE_B)

    assert summary.overallScore == 90
    assert summary.distribution == {"situps": 1, "sprint": 1}


@pytest.mark.asyncio
async def test_service_profile(results, accounts, profiles):
    service = AthleteService(InMemoryDataSource(results, accounts.values(), profiles.values()))

    profile = await service.get_profile(ATHLETE_B)

    assert profile.identity.name == "Bea Rao"
    assert profile.profile is None
    assert [r.score for r in profile.results] == [95, 85]
    assert profile.summary.lastTestAt == profile.results[0].createdAt


@pytest.mark.asyncio
async def test_service_profile_missing_athlete(results):
    service = AthleteService(InMemoryDataSource(results))

    assert await service.get_profile(ATHLETE_A) is None


def test_same_timestamp_results_trend_in_submission_order():
    # Newest first as fetched: "second" was stored after "first"
    fetched = [
        make_result(ATHLETE_A, 70, day=1, exercise="second"),
        make_result(ATHLETE_A, 60, day=1, exercise="first"),
        make_result(ATHLETE_A, 40, day=0),
    ]

    summary = summarize_athlete(fetched)

    assert [p.score for p in summary.trendSeries] == [40, 60, 70]
