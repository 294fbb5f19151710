import logging
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from birja.controllers import BaseController, has_blank
from birja.core.exceptions import BadRequestException, NotFoundException
from birja.models import Vacancy
from birja.repositories.application import ApplicationRepository
from birja.repositories.vacancy import VacancyRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'text', 'region')


class VacancyController(BaseController):

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.vacancy_repo = self.repository(VacancyRepository)
        self.application_repo = self.repository(ApplicationRepository)

    async def list_all(self) -> list[Vacancy]:
        return await self.vacancy_repo.get_all()

    async def list_mine(self, owner_id: uuid.UUID) -> list[Vacancy]:
        return await self.vacancy_repo.get_by_owner_id(owner_id)

    async def create(self, owner_id: uuid.UUID, attributes: dict) -> Vacancy:
        if has_blank(attributes, REQUIRED_FIELDS):
            raise BadRequestException("Missing required fields")
        async with self.session.begin():
            vacancy = await self.vacancy_repo.add({
                'title': attributes['title'],
                'text': attributes['text'],
                'region': attributes['region'],
                'salary': attributes.get('salary'),
                'profession': attributes.get('profession'),
                'images': attributes.get('images'),
                'owner_id': owner_id,
            })
        logger.info("Vacancy %s created by %s", vacancy.id, owner_id)
        return vacancy

    async def update(self, vacancy_id: int, owner_id: uuid.UUID, attributes: dict) -> Vacancy:
        async with self.session.begin():
            vacancy = await self._get_owned(vacancy_id, owner_id)
            if attributes:
                vacancy = await self.vacancy_repo.update(vacancy, attributes)
        logger.info("Vacancy %s updated (%s)", vacancy_id, ", ".join(attributes) or "no fields")
        return vacancy

    async def delete(self, vacancy_id: int, owner_id: uuid.UUID) -> dict:
        async with self.session.begin():
            await self._get_owned(vacancy_id, owner_id)
            removed = await self.application_repo.delete_by_offer_id(vacancy_id)
            await self.vacancy_repo.delete_vacancy(vacancy_id)
        logger.info("Vacancy %s deleted with %s applications", vacancy_id, removed)
        return {'ok': True}

    async def _get_owned(self, vacancy_id: int, owner_id: uuid.UUID) -> Vacancy:
        # other owners' vacancies are reported as missing
        vacancy = await self.vacancy_repo.get_by_id(vacancy_id)
        if vacancy is None or vacancy.owner_id != owner_id:
            raise NotFoundException("Not found")
        return vacancy
