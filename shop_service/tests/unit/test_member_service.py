from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shop_service.app.core.exceptions import IllegalStateError
from shop_service.app.models.member import Member
from shop_service.app.services.member_service import MemberService


class TestMemberService:
    """Unit tests for MemberService with a mocked repository."""

    @pytest.fixture
    def mock_session(self):
        """Mock async session."""
        session = Mock(spec=AsyncSession)
        session.commit = AsyncMock()
        return session

    @pytest.fixture
    def member_service(self, mock_session):
        """Create MemberService instance with mocked dependencies."""
        return MemberService(mock_session)

    @pytest.mark.asyncio
    async def test_join_returns_new_member_id(self, member_service, mock_session):
        """Joining with an unused name saves the member and returns its ID."""

        async def assign_id(member):
            member.id = 7
            return member

        member_service.member_repository.find_by_name = AsyncMock(return_value=[])
        member_service.member_repository.save = AsyncMock(side_effect=assign_id)

        member_id = await member_service.join(Member(name="kim"))

        assert member_id == 7
        member_service.member_repository.find_by_name.assert_called_once_with("kim")
        member_service.member_repository.save.assert_called_once()
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_join_duplicate_name_raises(self, member_service, mock_session):
        """Joining with a name that is already taken is rejected."""
        existing = Member(name="kim")
        existing.id = 1
        member_service.member_repository.find_by_name = AsyncMock(
            return_value=[existing]
        )
        member_service.member_repository.save = AsyncMock()

        with pytest.raises(IllegalStateError):
            await member_service.join(Member(name="kim"))

        member_service.member_repository.save.assert_not_called()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_join_unique_violation_raises(self, member_service, mock_session):
        """A name taken between the check and the commit is still rejected."""
        mock_session.rollback = AsyncMock()
        member_service.member_repository.find_by_name = AsyncMock(return_value=[])
        member_service.member_repository.save = AsyncMock(
            side_effect=IntegrityError("INSERT INTO members", {}, Exception("UNIQUE"))
        )

        with pytest.raises(IllegalStateError, match="Member already exists."):
            await member_service.join(Member(name="kim"))

        mock_session.rollback.assert_awaited_once()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_one_missing_member_raises_404(self, member_service):
        member_service.member_repository.find_one = AsyncMock(return_value=None)

        with pytest.raises(HTTPException) as exc_info:
            await member_service.find_one(99)

        assert exc_info.value.status_code == 404
        assert "Member not found" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_update_renames_member(self, member_service, mock_session):
        member = Member(name="kim")
        member.id = 3
        member_service.member_repository.find_one = AsyncMock(return_value=member)

        updated = await member_service.update(3, "lee")

        assert updated.name == "lee"
        mock_session.commit.assert_awaited_once()


class TestMemberServiceDatabase:
    """MemberService against a real SQLite database."""

    @pytest.mark.asyncio
    async def test_join_persists_member(self, db_session):
        member_service = MemberService(db_session)

        member_id = await member_service.join(Member(name="kim"))

        found = await member_service.find_one(member_id)
        assert found.id == member_id
        assert found.name == "kim"

    @pytest.mark.asyncio
    async def test_join_same_name_twice_fails(self, db_session):
        member_service = MemberService(db_session)
        await member_service.join(Member(name="kim"))

        with pytest.raises(IllegalStateError):
            await member_service.join(Member(name="kim"))

        members = await member_service.find_members()
        assert [member.name for member in members] == ["kim"]

    @pytest.mark.asyncio
    async def test_concurrent_joins_with_same_name(self, test_database_manager):
        """Two sessions that both pass the name check insert only one member."""
        async with test_database_manager.async_session_maker() as session_a:
            async with test_database_manager.async_session_maker() as session_b:
                service_a = MemberService(session_a)
                service_b = MemberService(session_b)

                assert await service_a.member_repository.find_by_name("kim") == []
                assert await service_b.member_repository.find_by_name("kim") == []

                await service_a.join(Member(name="kim"))

                # session_b checked before session_a committed
                service_b.member_repository.find_by_name = AsyncMock(return_value=[])
                with pytest.raises(IllegalStateError, match="Member already exists."):
                    await service_b.join(Member(name="kim"))

        async with test_database_manager.async_session_maker() as session:
            members = await MemberService(session).find_members()
            assert [member.name for member in members] == ["kim"]

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_fails(self, db_session):
        member_service = MemberService(db_session)
        await member_service.join(Member(name="kim"))
        lee_id = await member_service.join(Member(name="lee"))

        with pytest.raises(IllegalStateError):
            await member_service.update(lee_id, "kim")
