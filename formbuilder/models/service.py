from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base

class Service(Base):
    __tablename__ = "services"
    id = Column(Integer, primary_key=True, autoincrement=True)
    service_name = Column(String(100), nullable=False)

    forms = relationship("Form", back_populates="service")
    submissions = relationship("Submission", back_populates="service")
