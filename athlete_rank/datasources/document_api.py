"""Document store HTTP data API data source implementation."""

import logging
import asyncio
from typing import Any, Optional

import httpx

from athlete_rank.errors import DataSourceError
from athlete_rank.models import AccountRecord, ProfileRecord, ResultRecord
from .base import DataSource

logger = logging.getLogger(__name__)

# API constants
PAGE_SIZE = 1000
REQUEST_TIMEOUT = 30.0
MAX_RETRIES = 5
RETRY_DELAY = 2.0
RATE_LIMIT_DELAY = 0.5

# Collections
RESULTS_COLLECTION = "results"
USERS_COLLECTION = "users"
PROFILES_COLLECTION = "profiles"

# Never ship password hashes over the wire
ACCOUNT_PROJECTION = {
    "name": 1,
    "firstName": 1,
    "lastName": 1,
    "email": 1,
    "state": 1,
    "district": 1,
    "imageUrl": 1,
}
PROFILE_PROJECTION = {
    "userId": 1,
    "name": 1,
    "profileImage": 1,
    "state": 1,
    "sport": 1,
}


def _oid(athlete_id: str) -> dict:
    """Wrap an id as an extended JSON object id for filters."""
    return {"$oid": athlete_id}


class DocumentApiDataSource(DataSource):
    """
    Data source reading the athlete collections through an HTTP data API.
    
    Speaks the ``/action/find`` and ``/action/findOne`` endpoints with
    extended JSON bodies, so object ids and dates survive the round trip.
    
    Limitations:
    - Results are paged PAGE_SIZE documents at a time
    - Every athlete id is sent as an object id; non-hex ids never match
    """

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        data_source: str = "Cluster0",
        database: str = "athletes",
        retry_delay: float = RETRY_DELAY,
        rate_limit_delay: float = RATE_LIMIT_DELAY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the document API data source.
        
        Args:
            api_url: Base URL of the data API (without the /action suffix)
            api_key: API key sent in the ``api-key`` header
            data_source: Cluster name the API should route to
            database: Database holding the collections
            retry_delay: Seconds to wait before retrying a timed out request
            rate_limit_delay: Seconds to wait before retrying a rate limited request
            transport: Optional httpx transport, used to stub the API in tests
        """
        self.api_url = api_url
        self.api_key = api_key
        self.data_source = data_source
        self.database = database
        self.retry_delay = retry_delay
        self.rate_limit_delay = rate_limit_delay
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _make_request(self, action: str, payload: dict, retry_count: int = 0) -> dict:
        """
        Make HTTP request with timeout handling and retries.
        
        Args:
            action: Data API action (find, findOne)
            payload: Request payload without the routing fields
            retry_count: Current retry attempt
            
        Returns:
            Response JSON data
        """
        client = await self._get_client()
        endpoint = f"/action/{action}"
        body = {
            "dataSource": self.data_source,
            "database": self.database,
            **payload,
        }
        
        try:
            response = await client.post(
                endpoint,
                json=body,
                timeout=REQUEST_TIMEOUT
            )
            response.raise_for_status()
            return response.json()
            
        except httpx.TimeoutException as e:
            if retry_count < MAX_RETRIES:
                logger.warning(
                    f"Request to {endpoint} timed out (attempt {retry_count + 1}/{MAX_RETRIES}). "
                    f"Retrying in {self.retry_delay}s..."
                )
                await asyncio.sleep(self.retry_delay)
                return await self._make_request(action, payload, retry_count + 1)
            logger.error(f"Request to {endpoint} failed after {MAX_RETRIES} retries: {e}")
            raise DataSourceError(f"{endpoint} timed out after {MAX_RETRIES} retries") from e
                
        except httpx.HTTPStatusError as e:
            # Handle rate limiting (429 Too Many Requests)
            if e.response.status_code == 429 and retry_count < MAX_RETRIES:
                logger.warning(
                    f"Rate limited (429) on {endpoint} (attempt {retry_count + 1}/{MAX_RETRIES}). "
                    f"Retrying in {self.rate_limit_delay}s..."
                )
                await asyncio.sleep(self.rate_limit_delay)
                return await self._make_request(action, payload, retry_count + 1)
            
            logger.error(f"HTTP error {e.response.status_code} for {endpoint}: {e}")
            raise DataSourceError(
                f"{endpoint} returned HTTP {e.response.status_code}"
            ) from e
            
        except httpx.HTTPError as e:
            logger.error(f"Transport error for {endpoint}: {e}")
            raise DataSourceError(f"{endpoint} failed: {e}") from e

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                headers={
                    "Content-Type": "application/ejson",
                    "Accept": "application/ejson",
                    "api-key": self.api_key,
                },
                timeout=REQUEST_TIMEOUT,
                transport=self._transport,
            )
        return self._client

    async def _find_one(
        self,
        collection: str,
        query: dict,
        projection: dict,
    ) -> Optional[dict[str, Any]]:
        data = await self._make_request("findOne", {
            "collection": collection,
            "filter": query,
            "projection": projection,
        })
        return data.get("document") if data else None

    async def fetch_results(
        self,
        athlete_id: Optional[str] = None,
    ) -> list[ResultRecord]:
        """
        Retrieve results, newest first.
        
        Pages through the collection with skip/limit until a short page.
        """
        query = {"athleteId": _oid(athlete_id)} if athlete_id is not None else {}
        results: list[ResultRecord] = []
        skip = 0
        
        while True:
            data = await self._make_request("find", {
                "collection": RESULTS_COLLECTION,
                "filter": query,
                "sort": {"createdAt": -1},
                "skip": skip,
                "limit": PAGE_SIZE,
            })
            documents = data.get("documents", []) if data else []
            results.extend(ResultRecord.model_validate(d) for d in documents)
            
            # Fewer than a full page means no more data
            if len(documents) < PAGE_SIZE:
                break
            skip += PAGE_SIZE
        
        logger.debug(f"Fetched {len(results)} results (athlete={athlete_id})")
        return results

    async def fetch_account(self, athlete_id: str) -> Optional[AccountRecord]:
        """Get the account record, without credentials."""
        document = await self._find_one(
            USERS_COLLECTION,
            {"_id": _oid(athlete_id)},
            ACCOUNT_PROJECTION,
        )
        return AccountRecord.model_validate(document) if document else None

    async def fetch_profile(self, athlete_id: str) -> Optional[ProfileRecord]:
        """Get the profile record linked to the athlete."""
        document = await self._find_one(
            PROFILES_COLLECTION,
            {"userId": _oid(athlete_id)},
            PROFILE_PROJECTION,
        )
        return ProfileRecord.model_validate(document) if document else None

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
