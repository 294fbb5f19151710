from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from birja.models.user import User
from birja.repositories import BaseRepository

class UserRepository(BaseRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create_user(self, attributes: dict) -> User:
        user = User(**attributes)
        self.session.add(user)
        await self.session.flush()
        return user
