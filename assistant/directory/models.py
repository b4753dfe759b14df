"""Records returned by campus directory lookups."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class OfficerRecord:
    name: str
    position_title: str
    org_name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OfficerRecord':
        return cls(
            name=data["name"],
            position_title=data.get("position_title") or data.get("positionTitle", ""),
            org_name=data.get("org_name") or data.get("orgName", ""),
        )


@dataclass
class OfficerEntry:
    name: str
    position: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OfficerEntry':
        return cls(name=data["name"], position=data["position"])


@dataclass
class OfficerListing:
    org_name: str
    officers: List[OfficerEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OfficerListing':
        return cls(
            org_name=data.get("org_name") or data.get("orgName", ""),
            officers=[OfficerEntry.from_dict(o) for o in data.get("officers") or []],
        )


@dataclass
class CommitteeMember:
    name: str


@dataclass
class CommitteeRoster:
    org_name: str
    committee_title: str
    members: List[CommitteeMember] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CommitteeRoster':
        return cls(
            org_name=data.get("org_name") or data.get("orgName", ""),
            committee_title=data.get("committee_title") or data.get("committeeTitle", ""),
            members=[CommitteeMember(name=m["name"]) for m in data.get("members") or []],
        )


@dataclass
class RoomStatistics:
    total: int
    occupied: int
    vacant: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RoomStatistics':
        return cls(
            total=int(data["total"]),
            occupied=int(data["occupied"]),
            vacant=int(data["vacant"]),
        )
