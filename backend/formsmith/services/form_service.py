from typing import List
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from formsmith.core.exceptions import FormNotFoundError
from formsmith.models.form import Field, Form, Section, _utcnow
from formsmith.models.submission import Submission
from formsmith.schemas.form import FormCreate, FormSummary, FormUpdate, SectionCreate

logger = logging.getLogger(__name__)


class FormService:
    def __init__(self, db: Session):
        self.db = db

    def list_forms(self) -> List[FormSummary]:
        """Every form, newest first, with the number of submissions it has collected."""
        rows = (
            self.db.query(Form, func.count(Submission.id))
            .outerjoin(Submission, Submission.form_id == Form.id)
            .group_by(Form.id)
            .order_by(Form.created_at.desc())
            .all()
        )
        return [
            FormSummary(
                id=form.id,
                title=form.title,
                description=form.description,
                created_at=form.created_at,
                updated_at=form.updated_at,
                submission_count=count,
            )
            for form, count in rows
        ]

    def get_form(self, form_id: str) -> Form:
        form = (
            self.db.query(Form)
            .options(selectinload(Form.sections).selectinload(Section.fields))
            .filter(Form.id == form_id)
            .first()
        )
        if not form:
            raise FormNotFoundError(form_id)
        return form

    def create_form(self, payload: FormCreate) -> Form:
        form = Form(title=payload.title, description=payload.description)
        form.sections = self._build_sections(payload.sections)

        self.db.add(form)
        self.db.commit()
        logger.info(f"Created form {form.id} with {len(form.sections)} section(s)")
        return self.get_form(form.id)

    def update_form(self, form_id: str, payload: FormUpdate) -> Form:
        """Rewrite the form's header and replace every section and field.

        Existing sections are deleted before the submitted set is inserted, so
        responses tied to the old fields go with them.
        """
        form = self.get_form(form_id)
        form.title = payload.title
        form.description = payload.description
        form.updated_at = _utcnow()

        form.sections.clear()
        self.db.flush()
        form.sections.extend(self._build_sections(payload.sections))

        self.db.commit()
        logger.info(f"Updated form {form_id}")
        return self.get_form(form_id)

    def delete_form(self, form_id: str) -> None:
        form = self.db.query(Form).filter(Form.id == form_id).first()
        if not form:
            raise FormNotFoundError(form_id)

        self.db.delete(form)
        self.db.commit()
        logger.info(f"Deleted form {form_id}")

    def _build_sections(self, sections: List[SectionCreate]) -> List[Section]:
        return [
            Section(
                title=section.title,
                order=section_index,
                fields=[
                    Field(
                        label=field.label,
                        type=field.type,
                        required=field.required,
                        order=field_index,
                    )
                    for field_index, field in enumerate(section.fields)
                ],
            )
            for section_index, section in enumerate(sections)
        ]
