"""Shared fixtures for the ranking engine tests."""

from datetime import datetime, timedelta, timezone

import pytest

from athlete_rank.models import AccountRecord, ProfileRecord, ResultRecord

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)

ATHLETE_A = "a" * 24
ATHLETE_B = "b" * 24
ATHLETE_C = "c" * 24


def make_result(
    athlete_id: str,
    score,
    day: int = 0,
    exercise: str = "situps",
) -> ResultRecord:
    """Build a result submitted ``day`` days after BASE_TIME."""
    return ResultRecord(
        athleteId=athlete_id,
        exercise=exercise,
        score=score,
        createdAt=BASE_TIME + timedelta(days=day),
    )


@pytest.fixture
def results() -> list[ResultRecord]:
    """A(90 avg), B(90 avg), C(70 avg) across a handful of exercises."""
    return [
        make_result(ATHLETE_C, 70, day=0, exercise="sprint"),
        make_result(ATHLETE_B, 85, day=1, exercise="situps"),
        make_result(ATHLETE_A, 90, day=2, exercise="vertical_jump"),
        make_result(ATHLETE_B, 95, day=3, exercise="sprint"),
    ]


@pytest.fixture
def accounts() -> dict[str, AccountRecord]:
    return {
        ATHLETE_A: AccountRecord(
            _id=ATHLETE_A, name="Alex", state="Kerala", district="Ernakulam",
            imageUrl="/uploads/alex.png",
        ),
        ATHLETE_B: AccountRecord(
            _id=ATHLETE_B, firstName="Bea", lastName="Rao", state="Goa", district="North Goa",
        ),
        ATHLETE_C: AccountRecord(_id=ATHLETE_C, name="Chris"),
    }


@pytest.fixture
def profiles() -> dict[str, ProfileRecord]:
    return {
        ATHLETE_A: ProfileRecord(userId=ATHLETE_A, name="Sam", profileImage="/uploads/sam.png"),
    }
