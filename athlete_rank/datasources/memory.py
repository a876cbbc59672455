"""In-memory data source, used for tests and local runs without a store."""

from typing import Iterable, Optional

from athlete_rank.models import AccountRecord, ProfileRecord, ResultRecord
from .base import DataSource


class InMemoryDataSource(DataSource):
    """Data source backed by plain lists held in memory."""

    def __init__(
        self,
        results: Iterable[ResultRecord] = (),
        accounts: Iterable[AccountRecord] = (),
        profiles: Iterable[ProfileRecord] = (),
    ):
        self.results = list(results)
        self.accounts = {a.id: a for a in accounts if a.id}
        self.profiles = {p.userId: p for p in profiles if p.userId}
        self.closed = False

    async def fetch_results(
        self,
        athlete_id: Optional[str] = None,
    ) -> list[ResultRecord]:
        results = [
            r for r in self.results
            if athlete_id is None or r.athleteId == athlete_id
        ]
        return sorted(results, key=lambda r: r.createdAt, reverse=True)

    async def fetch_account(self, athlete_id: str) -> Optional[AccountRecord]:
        return self.accounts.get(athlete_id)

    async def fetch_profile(self, athlete_id: str) -> Optional[ProfileRecord]:
        return self.profiles.get(athlete_id)

    async def close(self) -> None:
        self.closed = True
