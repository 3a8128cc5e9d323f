from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from formbuilder.db.base import Base

class Collection(Base):
    __tablename__ = "collections"
    id = Column(Integer, primary_key=True, autoincrement=True)
    collection_name = Column(String(50), nullable=True)

    items = relationship("CollectionItem", back_populates="collection")
    fields = relationship("Field", back_populates="collection")


class CollectionItem(Base):
    __tablename__ = "collection_items"
    id = Column(Integer, primary_key=True, autoincrement=True)
    collection_id = Column(Integer, ForeignKey("collections.id"), nullable=True, index=True)
    collection_item = Column(String(50), nullable=True)
    # Optional link to another item, e.g. a city pointing at its region
    relation_collection_items_id = Column(Integer, ForeignKey("collection_items.id"), nullable=True, index=True)

    collection = relationship("Collection", back_populates="items")
    related_item = relationship("CollectionItem", remote_side=[id])
