from pydantic import BaseModel
from typing import List

from formsmith.models.form import FieldType


class PromptRequest(BaseModel):
    prompt: str


class GeneratedField(BaseModel):
    label: str
    type: FieldType
    required: bool
    order: int


class GeneratedSection(BaseModel):
    title: str
    order: int
    fields: List[GeneratedField]


class GeneratedForm(BaseModel):
    title: str
    description: str
    sections: List[GeneratedSection]
