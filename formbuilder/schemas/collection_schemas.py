from pydantic import BaseModel, Field
from typing import Optional
from .common import ORMModel

class CollectionRequest(BaseModel):
    collection_name: str = Field(..., min_length=1, max_length=50)

class CollectionResponse(ORMModel):
    id: int
    collection_name: Optional[str] = None

class CollectionItemRequest(BaseModel):
    collection_id: Optional[int] = None
    collection_item: str = Field(..., max_length=50)
    relation_collection_items_id: Optional[int] = None

class CollectionItemResponse(ORMModel):
    id: int
    collection_id: Optional[int] = None
    collection_item: Optional[str] = None
    relation_collection_items_id: Optional[int] = None
