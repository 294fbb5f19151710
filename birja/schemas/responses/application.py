from datetime import datetime
from typing import List, Optional

from birja.schemas import CamelModel
from birja.schemas.responses.vacancy import VacancyResponse


class ApplicationResponse(CamelModel):
    id: int
    offer_id: int
    name: str
    phone: str
    region: str
    interest: Optional[str] = None
    applicant_id: Optional[str] = None
    status: str
    contract: Optional[str] = None
    age: Optional[int] = None
    experience: Optional[str] = None
    salary_worker: Optional[str] = None
    images: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime
    offer: Optional[VacancyResponse] = None
