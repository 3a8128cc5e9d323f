from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base, TimestampMixin, SoftDeleteMixin

class Form(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "forms"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    data_type_id = Column(Integer, ForeignKey("data_types.id"), nullable=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=True)
    status = Column(Boolean, nullable=True)

    service = relationship("Service", back_populates="forms")
    form_fields = relationship("FormField", back_populates="form", order_by="FormField.id")
