from typing import Dict, List
import logging
import re

from sqlalchemy.orm import Session, selectinload

from formsmith.core.exceptions import FormNotFoundError, SubmissionValidationError
from formsmith.models.form import Field, FieldType, Form
from formsmith.models.submission import FieldResponse, Submission
from formsmith.schemas.submission import FieldResponseIn, SubmissionCreate
from formsmith.services.form_service import FormService

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def is_number(value: str) -> bool:
    """Plain decimal notation with an optional exponent; no hex, underscores or infinities."""
    return bool(_NUMBER.match(value.strip()))


def validate_responses(fields: Dict[str, Field], responses: List[FieldResponseIn]) -> Dict[str, str]:
    """Check answers against the form's field definitions.

    Returns a map of field id to error message; empty when everything passes.
    Optional fields may be left out or blank, NUMBER fields only need to parse
    when something was typed into them.
    """
    errors: Dict[str, str] = {}
    values: Dict[str, str] = {}

    for response in responses:
        if response.field_id not in fields:
            errors[response.field_id] = "Unknown field"
        elif response.field_id in values:
            errors[response.field_id] = "Duplicate response"
        else:
            values[response.field_id] = response.value

    for field_id, field in fields.items():
        if field_id in errors:
            continue
        value = values.get(field_id, "")
        if field.required and not value.strip():
            errors[field_id] = f"{field.label} is required"
        elif field.type == FieldType.NUMBER and value.strip() and not is_number(value):
            errors[field_id] = f"{field.label} must be a number"

    return errors


class SubmissionService:
    def __init__(self, db: Session):
        self.db = db

    def submit(self, form_id: str, payload: SubmissionCreate) -> Submission:
        form = FormService(self.db).get_form(form_id)
        fields = {field.id: field for section in form.sections for field in section.fields}

        errors = validate_responses(fields, payload.responses)
        if errors:
            logger.info(f"Rejected submission for form {form_id}: {errors}")
            raise SubmissionValidationError(errors)

        submission = Submission(
            form_id=form.id,
            responses=[
                FieldResponse(field_id=response.field_id, value=response.value)
                for response in payload.responses
            ],
        )
        self.db.add(submission)
        self.db.commit()
        logger.info(f"Stored submission {submission.id} for form {form_id} ({len(payload.responses)} responses)")
        return submission

    def list_submissions(self, form_id: str) -> List[Submission]:
        exists = self.db.query(Form.id).filter(Form.id == form_id).first()
        if not exists:
            raise FormNotFoundError(form_id)

        return (
            self.db.query(Submission)
            .options(selectinload(Submission.responses))
            .filter(Submission.form_id == form_id)
            .order_by(Submission.created_at.desc())
            .all()
        )
