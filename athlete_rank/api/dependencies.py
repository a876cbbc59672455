"""FastAPI dependencies for dependency injection."""

import re
from typing import AsyncIterator

from fastapi import Depends, HTTPException, Path, Request

from athlete_rank.config import Config
from athlete_rank.datasources import DataSource, DataSourceHandle


def get_config(request: Request) -> Config:
    """Get the configuration the app was created with."""
    return request.app.state.config


def get_datasource_handle(request: Request) -> DataSourceHandle:
    """Get the data source handle owned by the app."""
    handle = getattr(request.app.state, "datasource_handle", None)
    if handle is None:
        raise RuntimeError("DataSourceHandle not initialized. Create the app with create_app().")
    return handle


async def get_datasource(
    handle: DataSourceHandle = Depends(get_datasource_handle),
) -> AsyncIterator[DataSource]:
    """Acquire the shared data source for the duration of a request."""
    datasource = handle.acquire()
    try:
        yield datasource
    finally:
        handle.release()


def valid_athlete_id(
    athlete_id: str = Path(..., description="Athlete id"),
    config: Config = Depends(get_config),
) -> str:
    """Reject athlete ids that cannot exist in the store."""
    if not re.fullmatch(config.athlete_id_pattern, athlete_id):
        raise HTTPException(status_code=400, detail="Invalid or missing athleteId")
    return athlete_id
