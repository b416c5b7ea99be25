"""
Member service: registration with duplicate-name validation and lookups.
"""

from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import IllegalStateError
from ..models.member import Member
from ..repository.member_repository import MemberRepository
from ..utils.logging import setup_shop_logging as setup_logging

logger = setup_logging("shop_service.members")

DUPLICATE_MEMBER_MESSAGE = "Member already exists."


class MemberService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.member_repository = MemberRepository(session)

    async def join(self, member: Member) -> int:
        """Register a member and return the new member ID.

        The name check runs first; the unique constraint on ``members.name``
        catches a concurrent join that passed the check before this one
        committed.
        """
        await self._validate_duplicate_member(member)
        try:
            await self.member_repository.save(member)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(
                "Member registration rejected: name taken concurrently",
                extra={"event_type": "member_duplicate_name"},
            )
            raise IllegalStateError(DUPLICATE_MEMBER_MESSAGE) from e

        logger.info(
            "Member joined",
            extra={"member_id": member.id, "event_type": "member_joined"},
        )
        return member.id

    async def _validate_duplicate_member(self, member: Member) -> None:
        find_members = await self.member_repository.find_by_name(member.name)
        if find_members:
            logger.warning(
                "Member registration rejected: duplicate name",
                extra={"event_type": "member_duplicate_name"},
            )
            raise IllegalStateError(DUPLICATE_MEMBER_MESSAGE)

    async def find_members(self) -> List[Member]:
        return await self.member_repository.find_all()

    async def find_one(self, member_id: int) -> Member:
        member = await self.member_repository.find_one(member_id)
        if not member:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Member not found"
            )
        return member

    async def update(self, member_id: int, name: str) -> Member:
        """Rename a member; the change is flushed by dirty checking on commit"""
        member = await self.find_one(member_id)
        member.name = name
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise IllegalStateError(DUPLICATE_MEMBER_MESSAGE) from e
        return member
