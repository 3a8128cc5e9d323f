from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base

class FormGroup(Base):
    __tablename__ = "form_groups"
    id = Column(Integer, primary_key=True, autoincrement=True)
    group_name = Column(String(50), nullable=True)
    group_span = Column(Integer, nullable=True)
    group_row = Column(Integer, nullable=True)

    form_fields = relationship("FormField", back_populates="form_group")
