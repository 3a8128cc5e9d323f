from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base

class DataType(Base):
    __tablename__ = "data_types"
    id = Column(Integer, primary_key=True, autoincrement=True)
    data_type = Column(String(50), nullable=False)

    fields = relationship("Field", back_populates="data_type")
