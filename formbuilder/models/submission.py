from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from formbuilder.db.base import Base

class Submission(Base):
    __tablename__ = "submissions"
    id = Column(Integer, primary_key=True, autoincrement=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_on = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    service = relationship("Service", back_populates="submissions")
    creator = relationship("User", back_populates="submissions")
    answers = relationship(
        "FormAnswer",
        back_populates="submission",
        cascade="all, delete-orphan",
        order_by="FormAnswer.id",
    )


class FormAnswer(Base):
    __tablename__ = "form_answers"
    id = Column(Integer, primary_key=True, autoincrement=True)
    form_field_id = Column(Integer, ForeignKey("form_fields.id"), nullable=True, index=True)
    answer = Column(String(250), nullable=True)
    submission_id = Column(Integer, ForeignKey("submissions.id"), nullable=True, index=True)

    form_field = relationship("FormField", back_populates="answers")
    submission = relationship("Submission", back_populates="answers")
