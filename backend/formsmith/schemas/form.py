from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from formsmith.models.form import FieldType

MAX_SECTIONS = 2
MAX_FIELDS_PER_SECTION = 3


def _not_blank(value: str, what: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{what} is required")
    return value.strip()


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# Request bodies

class FieldCreate(CamelModel):
    label: str
    type: FieldType = FieldType.TEXT
    required: bool = False

    @field_validator("label")
    @classmethod
    def label_not_blank(cls, v: str) -> str:
        return _not_blank(v, "Field label")

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class SectionCreate(CamelModel):
    title: str
    fields: List[FieldCreate] = Field(default_factory=list, max_length=MAX_FIELDS_PER_SECTION)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return _not_blank(v, "Section title")


class FormCreate(CamelModel):
    title: str
    description: Optional[str] = None
    sections: List[SectionCreate] = Field(default_factory=list, max_length=MAX_SECTIONS)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return _not_blank(v, "Form title")


class FormUpdate(FormCreate):
    pass


# Responses

class FieldOut(CamelModel):
    id: str
    label: str
    type: FieldType
    required: bool
    order: int
    section_id: str


class SectionOut(CamelModel):
    id: str
    title: str
    order: int
    form_id: str
    fields: List[FieldOut] = []


class FormOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    sections: List[SectionOut] = []


class FormSummary(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    submission_count: int = 0


class FormDeleted(CamelModel):
    success: bool = True
    message: str
