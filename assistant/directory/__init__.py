"""
Campus directory collaborators: officer, committee and room lookups.
"""

import logging

from .base import CampusDirectory, DirectoryError, fail_closed
from .http_directory import HttpCampusDirectory
from .models import (
    CommitteeMember,
    CommitteeRoster,
    OfficerEntry,
    OfficerListing,
    OfficerRecord,
    RoomStatistics,
)
from .static_directory import DEFAULT_DATA_PATH, DirectoryLoader, StaticCampusDirectory

logger = logging.getLogger(__name__)


def build_directory(app_settings) -> CampusDirectory:
    """Create the directory selected by DIRECTORY_BACKEND."""
    if app_settings.DIRECTORY_BACKEND == "http":
        logger.info(f"Using HTTP campus directory at {app_settings.DIRECTORY_API_URL}")
        return HttpCampusDirectory(
            base_url=app_settings.DIRECTORY_API_URL,
            token=app_settings.DIRECTORY_API_TOKEN,
            timeout=app_settings.DIRECTORY_TIMEOUT,
        )

    logger.info("Using static campus directory")
    return StaticCampusDirectory(data_path=app_settings.DIRECTORY_DATA_PATH)


__all__ = [
    'CampusDirectory',
    'CommitteeMember',
    'CommitteeRoster',
    'DEFAULT_DATA_PATH',
    'DirectoryError',
    'DirectoryLoader',
    'HttpCampusDirectory',
    'OfficerEntry',
    'OfficerListing',
    'OfficerRecord',
    'RoomStatistics',
    'StaticCampusDirectory',
    'build_directory',
    'fail_closed',
]
