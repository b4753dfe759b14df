"""
Campus directory interface consumed by the response dispatcher.
"""

import functools
import logging
from typing import Optional, Protocol

from assistant.directory.models import (
    CommitteeRoster,
    OfficerListing,
    OfficerRecord,
    RoomStatistics,
)

logger = logging.getLogger(__name__)


class DirectoryError(Exception):
    """Raised when the campus directory cannot be reached or parsed."""
    pass


class CampusDirectory(Protocol):
    """Structural type for organization and room lookups."""

    async def lookup_officer(self, org_code: str, position_id: str) -> Optional[OfficerRecord]: ...

    async def lookup_all_officers(self, org_code: str) -> Optional[OfficerListing]: ...

    async def lookup_committee(self, org_code: str, committee_id: str) -> Optional[CommitteeRoster]: ...

    async def lookup_room_statistics(self) -> Optional[RoomStatistics]: ...


def fail_closed(func):
    """Log any error raised by a lookup coroutine and return None instead."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Directory lookup {func.__name__} failed: {e}")
            return None

    return wrapper
