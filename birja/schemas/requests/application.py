from typing import List, Optional
from pydantic import Field, StrictInt, field_validator

from birja.models.application_status import ApplicationStatus
from birja.schemas import CamelModel


class CandidateProfile(CamelModel):
    interest: Optional[str] = Field(None)
    contract: Optional[str] = Field(None)
    age: Optional[StrictInt] = Field(None)
    experience: Optional[str] = Field(None)
    salary_worker: Optional[str] = Field(None)
    images: Optional[List[str]] = Field(None)


class ApplicationCreateRequest(CandidateProfile):
    offer_id: Optional[StrictInt] = Field(None)
    name: Optional[str] = Field(None)
    phone: Optional[str] = Field(None)
    region: Optional[str] = Field(None)
    applicant_id: Optional[str] = Field(None)


class ManualCandidateRequest(CandidateProfile):
    name: Optional[str] = Field(None)
    phone: Optional[str] = Field(None)
    region: Optional[str] = Field(None)
    status: Optional[ApplicationStatus] = Field(None)


class ApplicationUpdateRequest(CandidateProfile):
    """Partial update of a candidate; any status may follow any other."""

    name: Optional[str] = Field(None)
    phone: Optional[str] = Field(None)
    region: Optional[str] = Field(None)
    applicant_id: Optional[str] = Field(None)
    status: Optional[ApplicationStatus] = Field(None)

    @field_validator("name", "phone", "region")
    def check_non_empty(cls, v):
        if v is None or not v.strip():
            raise ValueError("Field cant not be empty")
        return v

    @field_validator("status")
    def check_not_null(cls, v):
        if v is None:
            raise ValueError("Field cant not be null")
        return v
