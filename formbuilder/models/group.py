from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base, TimestampMixin

class Group(TimestampMixin, Base):
    __tablename__ = "groups"
    id = Column(Integer, primary_key=True, autoincrement=True)
    group_name = Column(String(50), nullable=False, unique=True)

    fields = relationship("Field", back_populates="group")
    form_fields = relationship("FormField", back_populates="group")
