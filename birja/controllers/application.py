import logging
import uuid
from sqlalchemy.ext.asyncio import AsyncSession
from birja.controllers import BaseController, has_blank
from birja.core.exceptions import BadRequestException, ForbiddenException, NotFoundException
from birja.models import Application, ApplicationStatus
from birja.repositories.application import ApplicationRepository
from birja.repositories.vacancy import VacancyRepository

logger = logging.getLogger(__name__)

PLACEHOLDER_TITLE = 'Candidat manual adăugat'
PLACEHOLDER_TEXT = 'Candidat adăugat manual de angajator'

PROFILE_FIELDS = ('interest', 'contract', 'age', 'experience', 'salary_worker', 'images')


def _status_value(status) -> str:
    if status is None:
        return ApplicationStatus.NEW.value
    return ApplicationStatus(status).value


class ApplicationController(BaseController):

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.application_repo = self.repository(ApplicationRepository)
        self.vacancy_repo = self.repository(VacancyRepository)

    async def submit(self, attributes: dict) -> Application:
        """Anonymous seeker applies to a vacancy."""
        if attributes.get('offer_id') is None or has_blank(attributes, ('name', 'phone', 'region')):
            raise BadRequestException("Missing required fields")
        async with self.session.begin():
            vacancy = await self.vacancy_repo.get_by_id(attributes['offer_id'])
            if vacancy is None:
                raise NotFoundException("Vacancy not found")
            application = await self.application_repo.add({
                'offer': vacancy,
                'name': attributes['name'],
                'phone': attributes['phone'],
                'region': attributes['region'],
                'applicant_id': attributes.get('applicant_id'),
                'status': ApplicationStatus.NEW.value,
                **{field: attributes.get(field) for field in PROFILE_FIELDS},
            })
        logger.info("Application %s submitted for vacancy %s", application.id, vacancy.id)
        return application

    async def update(self, application_id: int, employer_id: uuid.UUID, attributes: dict) -> Application:
        async with self.session.begin():
            application = await self.application_repo.get_by_id(application_id)
            if application is None:
                raise NotFoundException("Not found")
            if application.offer.owner_id != employer_id:
                raise ForbiddenException("Forbidden")
            if 'status' in attributes:
                attributes['status'] = _status_value(attributes['status'])
            if attributes:
                previous_status = application.status
                application = await self.application_repo.update(application, attributes)
                if application.status != previous_status:
                    logger.info(
                        "Application %s status %s -> %s", application.id, previous_status, application.status
                    )
        return application

    async def list_for_employer(self, employer_id: uuid.UUID) -> list[Application]:
        return await self.application_repo.get_by_vacancy_owner(employer_id)

    async def create_manual(self, employer_id: uuid.UUID, attributes: dict) -> Application:
        """Employer enters a candidate directly.

        Every application must reference a vacancy, so the candidate is
        attached to the employer's first vacancy; an employer without any
        gets a placeholder vacancy created for the purpose. Two concurrent
        first calls for the same employer may each create a placeholder.
        """
        if has_blank(attributes, ('name', 'phone', 'region')):
            raise BadRequestException("Missing required fields")
        async with self.session.begin():
            vacancy = await self.vacancy_repo.get_first_by_owner_id(employer_id)
            if vacancy is None:
                vacancy = await self.vacancy_repo.add({
                    'title': PLACEHOLDER_TITLE,
                    'text': PLACEHOLDER_TEXT,
                    'region': attributes['region'],
                    'salary': '',
                    'owner_id': employer_id,
                })
                logger.info("Placeholder vacancy %s created for %s", vacancy.id, employer_id)
            application = await self.application_repo.add({
                'offer': vacancy,
                'name': attributes['name'],
                'phone': attributes['phone'],
                'region': attributes['region'],
                'status': _status_value(attributes.get('status')),
                **{field: attributes.get(field) for field in PROFILE_FIELDS},
            })
        return application
