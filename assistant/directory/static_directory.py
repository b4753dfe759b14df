"""
Campus directory backed by a YAML roster file.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from assistant.directory.base import DirectoryError, fail_closed
from assistant.directory.models import (
    CommitteeMember,
    CommitteeRoster,
    OfficerEntry,
    OfficerListing,
    OfficerRecord,
    RoomStatistics,
)
from assistant.lexicon.entities import COMMITTEES, ORGANIZATIONS, POSITIONS

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "campus_directory.yaml"


class DirectoryLoader:
    """Loads roster data from YAML files."""

    @staticmethod
    def load_from_file(file_path: Union[str, Path]) -> Dict[str, Any]:
        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                data = yaml.safe_load(file) or {}
        except (OSError, yaml.YAMLError) as e:
            raise DirectoryError(f"Cannot load directory data from {file_path}: {e}")

        if not isinstance(data, dict):
            raise DirectoryError(f"Directory data in {file_path} must be a mapping")

        logger.info(f"Loaded campus directory from {file_path}")
        return data


class StaticCampusDirectory:
    """Answers lookups from an in-memory roster."""

    def __init__(self, data: Optional[Dict[str, Any]] = None, data_path: Optional[Union[str, Path]] = None):
        if data is None:
            data = DirectoryLoader.load_from_file(data_path or DEFAULT_DATA_PATH)
        self.organizations: Dict[str, Dict[str, Any]] = {
            str(code).upper(): org or {} for code, org in (data.get("organizations") or {}).items()
        }
        self.rooms = list(data.get("rooms") or [])

    def _organization(self, org_code: str) -> Optional[Dict[str, Any]]:
        return self.organizations.get(org_code.upper())

    def _org_name(self, org_code: str, org: Dict[str, Any]) -> str:
        if org.get("name"):
            return org["name"]
        known = ORGANIZATIONS.get(org_code.upper())
        return known.display_name if known else org_code.upper()

    @fail_closed
    async def lookup_officer(self, org_code: str, position_id: str) -> Optional[OfficerRecord]:
        org = self._organization(org_code)
        if org is None:
            return None

        name = (org.get("officers") or {}).get(position_id)
        if not name:
            return None

        position = POSITIONS.get(position_id)
        return OfficerRecord(
            name=name,
            position_title=position.title if position else position_id,
            org_name=self._org_name(org_code, org),
        )

    @fail_closed
    async def lookup_all_officers(self, org_code: str) -> Optional[OfficerListing]:
        org = self._organization(org_code)
        if org is None:
            return None

        officers = org.get("officers") or {}
        ordered = sorted(
            officers.items(),
            key=lambda item: POSITIONS[item[0]].priority if item[0] in POSITIONS else len(POSITIONS) + 1
        )
        return OfficerListing(
            org_name=self._org_name(org_code, org),
            officers=[
                OfficerEntry(
                    name=name,
                    position=POSITIONS[position_id].title if position_id in POSITIONS else position_id,
                )
                for position_id, name in ordered
                if name
            ],
        )

    @fail_closed
    async def lookup_committee(self, org_code: str, committee_id: str) -> Optional[CommitteeRoster]:
        org = self._organization(org_code)
        if org is None:
            return None

        committees = org.get("committees") or {}
        if committee_id not in committees:
            return None

        committee = COMMITTEES.get(committee_id)
        return CommitteeRoster(
            org_name=self._org_name(org_code, org),
            committee_title=committee.title if committee else committee_id,
            members=[CommitteeMember(name=name) for name in committees[committee_id] or []],
        )

    @fail_closed
    async def lookup_room_statistics(self) -> Optional[RoomStatistics]:
        if not self.rooms:
            return None
        occupied = sum(1 for room in self.rooms if room.get("occupied"))
        return RoomStatistics(
            total=len(self.rooms),
            occupied=occupied,
            vacant=len(self.rooms) - occupied,
        )
