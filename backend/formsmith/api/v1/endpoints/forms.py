from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

from formsmith.api.deps import require_admin
from formsmith.core.exceptions import FormNotFoundError, SubmissionValidationError
from formsmith.db.session import get_db
from formsmith.schemas.form import FormCreate, FormDeleted, FormOut, FormSummary, FormUpdate
from formsmith.schemas.submission import SubmissionCreate, SubmissionCreated, SubmissionOut
from formsmith.services.form_service import FormService
from formsmith.services.submission_service import SubmissionService

router = APIRouter()
logger = logging.getLogger(__name__)


def _database_error(db: Session, action: str, e: Exception) -> HTTPException:
    db.rollback()
    logger.error(f"Failed to {action}: {str(e)}")
    return HTTPException(status_code=500, detail=f"Failed to {action}")


@router.get("", response_model=List[FormSummary])
def get_all_forms(db: Session = Depends(get_db)):
    try:
        return FormService(db).list_forms()
    except SQLAlchemyError as e:
        raise _database_error(db, "fetch forms", e)


@router.post("", response_model=FormOut, status_code=201, dependencies=[Depends(require_admin)])
def create_form(payload: FormCreate, db: Session = Depends(get_db)):
    try:
        return FormService(db).create_form(payload)
    except SQLAlchemyError as e:
        raise _database_error(db, "create form", e)


@router.get("/{form_id}", response_model=FormOut)
def get_form(form_id: str, db: Session = Depends(get_db)):
    try:
        return FormService(db).get_form(form_id)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Form not found")
    except SQLAlchemyError as e:
        raise _database_error(db, "fetch form", e)


@router.put("/{form_id}", response_model=FormOut, dependencies=[Depends(require_admin)])
def update_form(form_id: str, payload: FormUpdate, db: Session = Depends(get_db)):
    try:
        return FormService(db).update_form(form_id, payload)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Form not found")
    except SQLAlchemyError as e:
        raise _database_error(db, "update form", e)


@router.delete("/{form_id}", response_model=FormDeleted, dependencies=[Depends(require_admin)])
def delete_form(form_id: str, db: Session = Depends(get_db)):
    try:
        FormService(db).delete_form(form_id)
        return FormDeleted(message="Form deleted")
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Form not found")
    except SQLAlchemyError as e:
        raise _database_error(db, "delete form", e)


@router.post("/{form_id}/submit", response_model=SubmissionCreated)
def submit_form(form_id: str, payload: SubmissionCreate, db: Session = Depends(get_db)):
    try:
        submission = SubmissionService(db).submit(form_id, payload)
        return SubmissionCreated(submission_id=submission.id)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Form not found")
    except SubmissionValidationError as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "errors": e.errors})
    except SQLAlchemyError as e:
        raise _database_error(db, "submit form", e)


@router.get("/{form_id}/submissions", response_model=List[SubmissionOut], dependencies=[Depends(require_admin)])
def get_form_submissions(form_id: str, db: Session = Depends(get_db)):
    try:
        return SubmissionService(db).list_submissions(form_id)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Form not found")
    except SQLAlchemyError as e:
        raise _database_error(db, "fetch submissions", e)
