import uuid
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from birja.models.vacancy import Vacancy
from birja.repositories import BaseRepository

class VacancyRepository(BaseRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, attributes: dict) -> Vacancy:
        vacancy = Vacancy(**attributes)
        self.session.add(vacancy)
        await self.session.flush()
        return vacancy

    async def get_by_id(self, vacancy_id: int) -> Vacancy | None:
        stmt = select(Vacancy).where(Vacancy.id == vacancy_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_all(self) -> list[Vacancy]:
        stmt = select(Vacancy).order_by(Vacancy.created_at.desc(), Vacancy.id.desc())
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_by_owner_id(self, owner_id: uuid.UUID) -> list[Vacancy]:
        stmt = (
            select(Vacancy)
            .where(Vacancy.owner_id == owner_id)
            .order_by(Vacancy.created_at.desc(), Vacancy.id.desc())
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_first_by_owner_id(self, owner_id: uuid.UUID) -> Vacancy | None:
        stmt = (
            select(Vacancy)
            .where(Vacancy.owner_id == owner_id)
            .order_by(Vacancy.id.asc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update(self, vacancy: Vacancy, attributes: dict) -> Vacancy:
        for key, value in attributes.items():
            setattr(vacancy, key, value)
        await self.session.flush()
        return vacancy

    async def delete_vacancy(self, vacancy_id: int):
        stmt = delete(Vacancy).where(Vacancy.id == vacancy_id)
        await self.session.execute(stmt)
