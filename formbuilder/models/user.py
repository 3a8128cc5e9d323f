from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base, TimestampMixin

class User(TimestampMixin, Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=True)
    middle_name = Column(String(100), nullable=True)
    surname = Column(String(100), nullable=True)
    dob = Column(Date, nullable=True)
    email = Column(String(250), nullable=False, unique=True, index=True)
    hashed_password = Column(String(250), nullable=True)

    submissions = relationship("Submission", back_populates="creator")
