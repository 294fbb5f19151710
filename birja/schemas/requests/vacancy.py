from typing import List, Optional
from pydantic import Field, field_validator

from birja.schemas import CamelModel


class VacancyCreateRequest(CamelModel):
    title: Optional[str] = Field(None)
    text: Optional[str] = Field(None)
    region: Optional[str] = Field(None)
    salary: Optional[str] = Field(None)
    profession: Optional[str] = Field(None)
    images: Optional[List[str]] = Field(None)


class VacancyUpdateRequest(CamelModel):
    """Partial update; only fields present in the request body are applied."""

    title: Optional[str] = Field(None)
    text: Optional[str] = Field(None)
    region: Optional[str] = Field(None)
    salary: Optional[str] = Field(None)
    profession: Optional[str] = Field(None)
    images: Optional[List[str]] = Field(None)

    @field_validator("title", "text", "region")
    def check_non_empty(cls, v):
        if v is None or not v.strip():
            raise ValueError("Field cant not be empty")
        return v
