import uuid
from datetime import datetime
from typing import List, Optional

from birja.schemas import CamelModel


class VacancyResponse(CamelModel):
    id: int
    owner_id: uuid.UUID
    title: str
    text: str
    region: str
    salary: Optional[str] = None
    profession: Optional[str] = None
    images: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime


class DeleteVacancyResponse(CamelModel):
    ok: bool = True
