from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from birja.controllers.vacancy import VacancyController
from birja.core.factory import Factory
from birja.core.middlewares.auth_middleware import require_employer
from birja.schemas.requests.vacancy import VacancyCreateRequest, VacancyUpdateRequest
from birja.schemas.responses.vacancy import DeleteVacancyResponse, VacancyResponse

vacancy_router = APIRouter(prefix='/api', tags=["VACANCIES"])


@vacancy_router.get('/vacancies', response_model=List[VacancyResponse])
async def list_vacancies(
    vacancy_controller: VacancyController = Depends(Factory.get_vacancy_controller),
):
    return await vacancy_controller.list_all()


@vacancy_router.get('/employer/vacancies', response_model=List[VacancyResponse])
async def list_my_vacancies(
    current_user: dict = Depends(require_employer),
    vacancy_controller: VacancyController = Depends(Factory.get_vacancy_controller),
):
    return await vacancy_controller.list_mine(UUID(current_user.get('id')))


@vacancy_router.post('/employer/vacancies', response_model=VacancyResponse)
async def create_vacancy(
    vacancy_request: VacancyCreateRequest,
    current_user: dict = Depends(require_employer),
    vacancy_controller: VacancyController = Depends(Factory.get_vacancy_controller),
):
    return await vacancy_controller.create(UUID(current_user.get('id')), vacancy_request.model_dump())


@vacancy_router.put('/employer/vacancies/{vacancy_id}', response_model=VacancyResponse)
async def update_vacancy(
    vacancy_id: int,
    vacancy_request: VacancyUpdateRequest,
    current_user: dict = Depends(require_employer),
    vacancy_controller: VacancyController = Depends(Factory.get_vacancy_controller),
):
    attributes = vacancy_request.model_dump(exclude_unset=True)
    return await vacancy_controller.update(vacancy_id, UUID(current_user.get('id')), attributes)


@vacancy_router.delete('/employer/vacancies/{vacancy_id}', response_model=DeleteVacancyResponse)
async def delete_vacancy(
    vacancy_id: int,
    current_user: dict = Depends(require_employer),
    vacancy_controller: VacancyController = Depends(Factory.get_vacancy_controller),
):
    return await vacancy_controller.delete(vacancy_id, UUID(current_user.get('id')))
