from pydantic import Field, field_validator
from typing import List
from datetime import datetime

from formsmith.schemas.form import CamelModel


class FieldResponseIn(CamelModel):
    field_id: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def number_as_text(cls, v):
        # Answers are stored as raw strings, so JSON numbers keep their literal form
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class SubmissionCreate(CamelModel):
    responses: List[FieldResponseIn] = Field(default_factory=list)


class SubmissionCreated(CamelModel):
    success: bool = True
    submission_id: str


class FieldResponseOut(CamelModel):
    id: str
    field_id: str
    submission_id: str
    value: str


class SubmissionOut(CamelModel):
    id: str
    form_id: str
    created_at: datetime
    responses: List[FieldResponseOut] = []
