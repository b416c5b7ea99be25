from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.member import Member


class MemberRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, member: Member) -> Member:
        self.session.add(member)
        await self.session.flush()  # Assigns the member ID
        return member

    async def find_one(self, member_id: int) -> Optional[Member]:
        return await self.session.get(Member, member_id)

    async def find_all(self) -> List[Member]:
        result = await self.session.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())

    async def find_by_name(self, name: str) -> List[Member]:
        result = await self.session.execute(select(Member).where(Member.name == name))
        return list(result.scalars().all())
