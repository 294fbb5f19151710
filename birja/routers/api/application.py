from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from birja.controllers.application import ApplicationController
from birja.core.factory import Factory
from birja.core.middlewares.auth_middleware import require_employer
from birja.schemas.requests.application import (
    ApplicationCreateRequest,
    ApplicationUpdateRequest,
    ManualCandidateRequest,
)
from birja.schemas.responses.application import ApplicationResponse

application_router = APIRouter(prefix='/api', tags=["APPLICATIONS"])


@application_router.post('/applications', response_model=ApplicationResponse)
async def submit_application(
    application_request: ApplicationCreateRequest,
    application_controller: ApplicationController = Depends(Factory.get_application_controller),
):
    return await application_controller.submit(application_request.model_dump())


@application_router.put('/applications/{application_id}', response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    application_request: ApplicationUpdateRequest,
    current_user: dict = Depends(require_employer),
    application_controller: ApplicationController = Depends(Factory.get_application_controller),
):
    attributes = application_request.model_dump(exclude_unset=True)
    return await application_controller.update(application_id, UUID(current_user.get('id')), attributes)


@application_router.get('/employer/candidates', response_model=List[ApplicationResponse], tags=["CANDIDATES"])
async def list_candidates(
    current_user: dict = Depends(require_employer),
    application_controller: ApplicationController = Depends(Factory.get_application_controller),
):
    return await application_controller.list_for_employer(UUID(current_user.get('id')))


@application_router.post('/employer/candidates', response_model=ApplicationResponse, tags=["CANDIDATES"])
async def create_candidate(
    candidate_request: ManualCandidateRequest,
    current_user: dict = Depends(require_employer),
    application_controller: ApplicationController = Depends(Factory.get_application_controller),
):
    return await application_controller.create_manual(UUID(current_user.get('id')), candidate_request.model_dump())
