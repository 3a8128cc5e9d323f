from sqlalchemy import Column, Integer, String, ForeignKey, JSON
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base, TimestampMixin

class FormField(TimestampMixin, Base):
    __tablename__ = "form_fields"
    id = Column(Integer, primary_key=True, autoincrement=True)
    form_id = Column(Integer, ForeignKey("forms.id"), nullable=False, index=True)
    field_id = Column(Integer, ForeignKey("fields.id"), nullable=False, index=True)
    field_name = Column(String(50), nullable=True)
    validation = Column(JSON, nullable=True)
    field_span = Column(Integer, nullable=True)
    field_row = Column(Integer, nullable=True)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=True, index=True)
    form_group_id = Column(Integer, ForeignKey("form_groups.id"), nullable=True, index=True)

    form = relationship("Form", back_populates="form_fields")
    field = relationship("Field", back_populates="form_fields")
    group = relationship("Group", back_populates="form_fields")
    form_group = relationship("FormGroup", back_populates="form_fields")
    answers = relationship("FormAnswer", back_populates="form_field")
