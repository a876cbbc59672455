"""Abstract base class for data sources."""

from abc import ABC, abstractmethod
from typing import Optional

from athlete_rank.models import AccountRecord, ProfileRecord, ResultRecord


class DataSource(ABC):
    """
    Abstract interface for the athlete document store.
    
    The ranking engine only ever reads through this interface, so the
    store behind it (an HTTP data API, an in-process dict, ...) can be
    swapped without touching the services.
    """

    @abstractmethod
    async def fetch_results(
        self,
        athlete_id: Optional[str] = None,
    ) -> list[ResultRecord]:
        """
        Retrieve submitted results.
        
        Args:
            athlete_id: Restrict to one athlete, None for every athlete
            
        Returns:
            List of ResultRecord objects sorted by createdAt descending
        """
        pass

    @abstractmethod
    async def fetch_account(self, athlete_id: str) -> Optional[AccountRecord]:
        """
        Get the account record of an athlete.
        
        Returns:
            AccountRecord, or None if the athlete has no account
        """
        pass

    @abstractmethod
    async def fetch_profile(self, athlete_id: str) -> Optional[ProfileRecord]:
        """
        Get the profile record of an athlete.
        
        Returns:
            ProfileRecord, or None if the athlete never created a profile
        """
        pass

    async def close(self) -> None:
        """
        Clean up resources (e.g., close HTTP sessions).
        
        Override this if the data source holds resources that need cleanup.
        """
        pass
