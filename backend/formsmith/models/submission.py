from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from formsmith.db.session import Base
from formsmith.models.form import _new_id, _utcnow


class Submission(Base):
    """One visitor's completed attempt at a form. Never updated after insert."""

    __tablename__ = "submissions"

    id = Column(String(36), primary_key=True, default=_new_id)
    form_id = Column(String(36), ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    form = relationship("Form", back_populates="submissions")
    responses = relationship(
        "FieldResponse",
        back_populates="submission",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class FieldResponse(Base):
    __tablename__ = "field_responses"

    id = Column(String(36), primary_key=True, default=_new_id)
    value = Column(Text, nullable=False)  # raw string regardless of field type
    field_id = Column(String(36), ForeignKey("fields.id", ondelete="CASCADE"), nullable=False, index=True)
    submission_id = Column(String(36), ForeignKey("submissions.id", ondelete="CASCADE"), nullable=False, index=True)

    field = relationship("Field", back_populates="responses")
    submission = relationship("Submission", back_populates="responses")
