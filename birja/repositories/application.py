import uuid
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from birja.models.application import Application
from birja.models.vacancy import Vacancy
from birja.repositories import BaseRepository

class ApplicationRepository(BaseRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, attributes: dict) -> Application:
        application = Application(**attributes)
        self.session.add(application)
        await self.session.flush()
        return application

    async def get_by_id(self, application_id: int) -> Application | None:
        stmt = (
            select(Application)
            .where(Application.id == application_id)
            .options(joinedload(Application.offer))
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_vacancy_owner(self, owner_id: uuid.UUID) -> list[Application]:
        stmt = (
            select(Application)
            .join(Application.offer)
            .where(Vacancy.owner_id == owner_id)
            .options(joinedload(Application.offer))
            .order_by(Application.created_at.desc(), Application.id.desc())
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def update(self, application: Application, attributes: dict) -> Application:
        for key, value in attributes.items():
            setattr(application, key, value)
        await self.session.flush()
        return application

    async def delete_by_offer_id(self, offer_id: int) -> int:
        stmt = delete(Application).where(Application.offer_id == offer_id)
        result = await self.session.execute(stmt)
        return result.rowcount
