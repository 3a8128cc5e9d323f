from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base, TimestampMixin

class Field(TimestampMixin, Base):
    __tablename__ = "fields"
    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(50), nullable=False)
    data_type_id = Column(Integer, ForeignKey("data_types.id"), nullable=False)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=True, index=True)
    collection_id = Column(Integer, ForeignKey("collections.id"), nullable=True, index=True)
    status = Column(Boolean, nullable=True)
    meta = Column(JSON, nullable=True)
    is_required = Column(Boolean, nullable=False, default=False)

    data_type = relationship("DataType", back_populates="fields", lazy="joined")
    group = relationship("Group", back_populates="fields")
    collection = relationship("Collection", back_populates="fields")
    form_fields = relationship("FormField", back_populates="field")

    @property
    def type(self):
        """Name of the field's data type, e.g. "text" """
        return self.data_type.data_type if self.data_type else None
