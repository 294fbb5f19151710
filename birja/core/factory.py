from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from birja.controllers.application import ApplicationController
from birja.controllers.auth import AuthController
from birja.controllers.vacancy import VacancyController
from birja.core.databases import get_session
from birja.services.cloudflare_images import CloudflareImagesService, get_cloudflare_images_service


class Factory:

    def get_auth_controller(session: AsyncSession = Depends(get_session)) -> AuthController:
        return AuthController(
            session
        )

    def get_vacancy_controller(session: AsyncSession = Depends(get_session)) -> VacancyController:
        return VacancyController(
            session
        )

    def get_application_controller(session: AsyncSession = Depends(get_session)) -> ApplicationController:
        return ApplicationController(
            session
        )

    def get_images_service(
            images_service: CloudflareImagesService = Depends(get_cloudflare_images_service)
    ) -> CloudflareImagesService:
        return images_service
