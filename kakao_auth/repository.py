# kakao_auth/repository.py
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Member
from .schemas import MemberUpdate


class MemberRepository:
    """members 테이블 쿼리 모음. 요청마다 세션 하나로 생성된다."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Member | None:
        r = await self.db.execute(select(Member).where(Member.email == email).order_by(Member.id).limit(1))
        return r.scalars().first()

    async def create(self, email: str, name: str | None) -> Member:
        m = Member(email=email, name=name)
        self.db.add(m)
        await self.db.commit()
        await self.db.refresh(m)
        return m

    async def get_name_and_birthday(self, member_id: int):
        r = await self.db.execute(select(Member.name, Member.birth_date).where(Member.id == member_id))
        return r.one_or_none()

    async def get_profile(self, member_id: int):
        r = await self.db.execute(select(Member.name, Member.email).where(Member.id == member_id))
        return r.one_or_none()

    async def update(self, member_id: int, data: MemberUpdate) -> None:
        """전달된 필드만 UPDATE 한 문장으로 반영한다. 이메일 중복 재확인은 하지 않는다."""
        await self.db.execute(update(Member).where(Member.id == member_id).values(**data.changes()))
        await self.db.commit()
