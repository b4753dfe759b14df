"""Tests for campus directory backends."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from assistant.directory import (
    CommitteeRoster,
    DirectoryError,
    DirectoryLoader,
    HttpCampusDirectory,
    OfficerListing,
    OfficerRecord,
    RoomStatistics,
    StaticCampusDirectory,
    build_directory,
    fail_closed,
)


def mock_session(status=200, payload=None, text=""):
    """aiohttp-like session whose GET yields one canned response."""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)

    request = MagicMock()
    request.__aenter__ = AsyncMock(return_value=response)
    request.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.closed = False
    session.get.return_value = request
    session.close = AsyncMock()
    return session


class TestStaticCampusDirectory:
    """Test the YAML-backed directory."""

    @pytest.mark.asyncio
    async def test_lookup_officer(self, static_directory):
        """Test a filled position."""
        record = await static_directory.lookup_officer("csc", "president")

        assert record == OfficerRecord("Adrian Flores", "President", "Computer Science Clique")

    @pytest.mark.asyncio
    async def test_lookup_officer_missing(self, static_directory):
        """Test vacant positions and unknown organizations."""
        assert await static_directory.lookup_officer("CSC", "auditor") is None
        assert await static_directory.lookup_officer("HS", "president") is None

    @pytest.mark.asyncio
    async def test_lookup_all_officers_in_rank_order(self, static_directory):
        """Test officers are listed by position priority."""
        listing = await static_directory.lookup_all_officers("BITS")

        assert listing.org_name == "Builders of Innovative Technologist Society"
        assert [officer.position for officer in listing.officers] == [
            "President",
            "Vice President for External Affairs",
            "Public Relations Officer",
        ]

    @pytest.mark.asyncio
    async def test_lookup_committee(self, static_directory):
        """Test committee rosters."""
        roster = await static_directory.lookup_committee("CSG", "publicity")

        assert roster.committee_title == "Publicity Committee"
        assert [member.name for member in roster.members] == ["Kim Navarro", "Rafael Ramos"]

    @pytest.mark.asyncio
    async def test_lookup_committee_missing(self, static_directory):
        """Test absent and empty committees."""
        assert await static_directory.lookup_committee("CSG", "audits") is None

        empty = await static_directory.lookup_committee("BITS", "publicity")
        assert empty.members == []

    @pytest.mark.asyncio
    async def test_room_statistics(self, static_directory):
        """Test room counts."""
        assert await static_directory.lookup_room_statistics() == RoomStatistics(6, 3, 3)

    @pytest.mark.asyncio
    async def test_in_memory_data(self):
        """Test a directory built from a dict."""
        directory = StaticCampusDirectory(data={
            "organizations": {"tf": {"officers": {"president": "Lea Uy"}}},
        })

        record = await directory.lookup_officer("TF", "president")
        assert record.org_name == "The Flare"
        assert await directory.lookup_room_statistics() is None

    def test_load_from_file(self, tmp_path):
        """Test loading a roster file."""
        path = tmp_path / "roster.yaml"
        path.write_text("organizations:\n  CSG:\n    officers:\n      president: Test Name\n")

        data = DirectoryLoader.load_from_file(path)
        assert data["organizations"]["CSG"]["officers"]["president"] == "Test Name"

    @pytest.mark.parametrize("content", ["organizations: [unclosed", "- just\n- a list\n"])
    def test_load_invalid_file(self, tmp_path, content):
        """Test malformed roster files are rejected."""
        path = tmp_path / "roster.yaml"
        path.write_text(content)

        with pytest.raises(DirectoryError):
            DirectoryLoader.load_from_file(path)

    def test_load_missing_file(self, tmp_path):
        """Test a missing roster file is rejected."""
        with pytest.raises(DirectoryError):
            StaticCampusDirectory(data_path=tmp_path / "missing.yaml")


class TestFailClosed:
    """Test the lookup error guard."""

    @pytest.mark.asyncio
    async def test_error_becomes_none(self):
        """Test an exception inside a lookup is swallowed into None."""

        @fail_closed
        async def lookup():
            raise RuntimeError("boom")

        assert await lookup() is None

    @pytest.mark.asyncio
    async def test_result_passes_through(self):
        """Test successful lookups are unchanged."""

        @fail_closed
        async def lookup():
            return 42

        assert await lookup() == 42


class TestHttpCampusDirectory:
    """Test the REST directory client."""

    @pytest.fixture
    def directory(self):
        return HttpCampusDirectory(base_url="http://portal.test/api/", token="secret", timeout=5)

    def test_init(self, directory):
        """Test client configuration."""
        assert directory.base_url == "http://portal.test/api"
        assert directory.token == "secret"
        assert directory.timeout == 5
        assert directory.session is None

    @pytest.mark.asyncio
    async def test_get_json_ok(self, directory):
        """Test a successful GET returns the payload."""
        directory.session = mock_session(payload={"total": 4, "occupied": 1, "vacant": 3})

        data = await directory._get_json("/rooms/statistics")

        assert data == {"total": 4, "occupied": 1, "vacant": 3}
        directory.session.get.assert_called_once_with("http://portal.test/api/rooms/statistics")

    @pytest.mark.asyncio
    async def test_get_json_not_found(self, directory):
        """Test 404 means no record."""
        directory.session = mock_session(status=404)
        assert await directory._get_json("/organizations/XX/officers") is None

    @pytest.mark.asyncio
    async def test_get_json_server_error(self, directory):
        """Test other statuses raise DirectoryError."""
        directory.session = mock_session(status=500, text="Internal Server Error")

        with pytest.raises(DirectoryError, match="500"):
            await directory._get_json("/rooms/statistics")

    @pytest.mark.asyncio
    async def test_get_json_connection_error(self, directory):
        """Test transport errors raise DirectoryError."""
        directory.session = mock_session()
        directory.session.get.side_effect = aiohttp.ClientConnectionError("refused")

        with pytest.raises(DirectoryError):
            await directory._get_json("/rooms/statistics")

    @pytest.mark.asyncio
    async def test_lookup_officer(self, directory):
        """Test camelCase payloads map to records."""
        directory._get_json = AsyncMock(return_value={
            "name": "Maria Santos",
            "positionTitle": "President",
            "orgName": "Central Student Government",
        })

        record = await directory.lookup_officer("CSG", "president")

        assert record == OfficerRecord("Maria Santos", "President", "Central Student Government")
        directory._get_json.assert_awaited_once_with("/organizations/CSG/officers/president")

    @pytest.mark.asyncio
    async def test_lookup_all_officers(self, directory):
        """Test officer listings."""
        directory._get_json = AsyncMock(return_value={
            "orgName": "Central Student Government",
            "officers": [{"name": "Maria Santos", "position": "President"}],
        })

        listing = await directory.lookup_all_officers("CSG")

        assert isinstance(listing, OfficerListing)
        assert listing.officers[0].name == "Maria Santos"

    @pytest.mark.asyncio
    async def test_lookup_committee(self, directory):
        """Test committee rosters."""
        directory._get_json = AsyncMock(return_value={
            "org_name": "Central Student Government",
            "committee_title": "Publicity Committee",
            "members": [{"name": "Kim Navarro"}],
        })

        roster = await directory.lookup_committee("CSG", "publicity")

        assert isinstance(roster, CommitteeRoster)
        assert roster.members[0].name == "Kim Navarro"

    @pytest.mark.asyncio
    async def test_lookup_errors_fail_closed(self, directory):
        """Test lookups return None when the backend fails."""
        directory._get_json = AsyncMock(side_effect=DirectoryError("down"))
        assert await directory.lookup_room_statistics() is None

    @pytest.mark.asyncio
    async def test_health_check(self, directory):
        """Test health check reflects backend reachability."""
        directory._get_json = AsyncMock(return_value={"total": 1, "occupied": 0, "vacant": 1})
        assert await directory.health_check() is True

        directory._get_json = AsyncMock(side_effect=DirectoryError("down"))
        assert await directory.health_check() is False

    @pytest.mark.asyncio
    async def test_close(self, directory):
        """Test closing releases the session."""
        session = mock_session()
        directory.session = session

        await directory.close()
        session.close.assert_awaited_once()


class TestBuildDirectory:
    """Test directory selection from settings."""

    def test_static_backend(self):
        """Test the default static backend."""
        app_settings = SimpleNamespace(DIRECTORY_BACKEND="static", DIRECTORY_DATA_PATH=None)
        assert isinstance(build_directory(app_settings), StaticCampusDirectory)

    def test_http_backend(self):
        """Test the HTTP backend takes its connection settings."""
        app_settings = SimpleNamespace(
            DIRECTORY_BACKEND="http",
            DIRECTORY_API_URL="http://portal.test/api",
            DIRECTORY_API_TOKEN=None,
            DIRECTORY_TIMEOUT=3,
        )
        directory = build_directory(app_settings)

        assert isinstance(directory, HttpCampusDirectory)
        assert directory.base_url == "http://portal.test/api"
        assert directory.timeout == 3
