"""Reference-counted handle around a lazily created data source."""

import logging
from typing import Callable, Optional

from .base import DataSource

logger = logging.getLogger(__name__)


class DataSourceHandle:
    """
    Owns one data source for the lifetime of the process.
    
    The data source is created on first acquire and reused afterwards.
    Releasing the last reference does not close it; only ``close()`` at
    shutdown does.
    """

    def __init__(self, factory: Callable[[], DataSource]):
        self._factory = factory
        self._datasource: Optional[DataSource] = None
        self._refs = 0

    @property
    def refs(self) -> int:
        """Number of outstanding acquisitions."""
        return self._refs

    @property
    def initialized(self) -> bool:
        return self._datasource is not None

    def acquire(self) -> DataSource:
        """Get the shared data source, creating it on first use."""
        if self._datasource is None:
            self._datasource = self._factory()
            logger.info(f"Initialized data source {type(self._datasource).__name__}")
        self._refs += 1
        return self._datasource

    def release(self) -> None:
        """Give back one acquisition."""
        if self._refs <= 0:
            raise RuntimeError("DataSourceHandle released more often than acquired")
        self._refs -= 1

    async def close(self) -> None:
        """Close the data source at shutdown."""
        if self._datasource is None:
            return
        if self._refs:
            logger.warning(f"Closing data source with {self._refs} outstanding references")
        await self._datasource.close()
        self._datasource = None
