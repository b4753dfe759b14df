"""
Async REST client for the portal backend's directory endpoints.
Handles session lifecycle and maps JSON payloads to directory records.
"""

import logging
from typing import Any, Dict, Optional

import aiohttp

from app.core.config import settings

from assistant.directory.base import DirectoryError, fail_closed
from assistant.directory.models import (
    CommitteeRoster,
    OfficerListing,
    OfficerRecord,
    RoomStatistics,
)

logger = logging.getLogger(__name__)


class HttpCampusDirectory:
    """Async client for organization and room lookups over HTTP."""

    def __init__(self, base_url: str = None, token: Optional[str] = None, timeout: int = None):
        self.base_url = (base_url or settings.DIRECTORY_API_URL).rstrip("/")
        self.token = token if token is not None else settings.DIRECTORY_API_TOKEN
        self.timeout = timeout or settings.DIRECTORY_TIMEOUT
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def connect(self):
        """Initialize HTTP session."""
        if self.session is None or self.session.closed:
            headers = {"Accept": "application/json"}
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self.session = aiohttp.ClientSession(
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )

    async def close(self):
        """Close HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def _get_json(self, path: str) -> Optional[Dict[str, Any]]:
        """GET a path relative to the base URL; None on 404."""
        try:
            await self.connect()
            async with self.session.get(f"{self.base_url}{path}") as response:
                if response.status == 404:
                    return None
                if response.status != 200:
                    error_text = await response.text()
                    raise DirectoryError(f"GET {path} failed: {response.status} - {error_text}")
                return await response.json()
        except aiohttp.ClientError as e:
            raise DirectoryError(f"Connection error during GET {path}: {e}")

    @fail_closed
    async def lookup_officer(self, org_code: str, position_id: str) -> Optional[OfficerRecord]:
        data = await self._get_json(f"/organizations/{org_code}/officers/{position_id}")
        return OfficerRecord.from_dict(data) if data else None

    @fail_closed
    async def lookup_all_officers(self, org_code: str) -> Optional[OfficerListing]:
        data = await self._get_json(f"/organizations/{org_code}/officers")
        return OfficerListing.from_dict(data) if data else None

    @fail_closed
    async def lookup_committee(self, org_code: str, committee_id: str) -> Optional[CommitteeRoster]:
        data = await self._get_json(f"/organizations/{org_code}/committees/{committee_id}")
        return CommitteeRoster.from_dict(data) if data else None

    @fail_closed
    async def lookup_room_statistics(self) -> Optional[RoomStatistics]:
        data = await self._get_json("/rooms/statistics")
        return RoomStatistics.from_dict(data) if data else None

    async def health_check(self) -> bool:
        """Check that the directory backend answers."""
        try:
            return await self._get_json("/rooms/statistics") is not None
        except DirectoryError as e:
            logger.error(f"Directory health check failed: {e}")
            return False
