from sqlalchemy import Column, Integer, String
from formbuilder.db.base import Base

class ReservedName(Base):
    __tablename__ = "reserved_names"
    id = Column(Integer, primary_key=True, autoincrement=True)
    reserved_name = Column(String(50), nullable=False, unique=True)
