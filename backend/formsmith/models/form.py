import enum
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from formsmith.db.session import Base


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FieldType(str, enum.Enum):
    TEXT = "TEXT"
    NUMBER = "NUMBER"


class Form(Base):
    __tablename__ = "forms"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    sections = relationship(
        "Section",
        back_populates="form",
        order_by="Section.order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    submissions = relationship(
        "Submission",
        back_populates="form",
        order_by="Submission.created_at.desc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Form {self.id}: {self.title}>"


class Section(Base):
    __tablename__ = "sections"
    __table_args__ = (UniqueConstraint("form_id", "order", name="uq_sections_form_order"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(String(255), nullable=False)
    order = Column(Integer, nullable=False)
    form_id = Column(String(36), ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True)

    form = relationship("Form", back_populates="sections")
    fields = relationship(
        "Field",
        back_populates="section",
        order_by="Field.order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Section {self.order}: {self.title}>"


class Field(Base):
    __tablename__ = "fields"
    __table_args__ = (UniqueConstraint("section_id", "order", name="uq_fields_section_order"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    label = Column(String(255), nullable=False)
    type = Column(Enum(FieldType, name="field_type"), nullable=False, default=FieldType.TEXT)
    required = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False)
    section_id = Column(String(36), ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True)

    section = relationship("Section", back_populates="fields")
    responses = relationship(
        "FieldResponse",
        back_populates="field",
        cascade="all",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Field {self.order}: {self.label} ({self.type})>"
