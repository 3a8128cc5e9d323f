from pydantic import BaseModel, Field as PydanticField
from typing import Any, Dict, Optional
from datetime import datetime
from .common import ORMModel

class FieldRequest(BaseModel):
    label: str = PydanticField(..., min_length=1, max_length=50)
    data_type_id: int
    group_id: Optional[int] = None
    collection_id: Optional[int] = None
    status: Optional[bool] = None
    meta: Optional[Dict[str, Any]] = None
    is_required: bool = False

class FieldResponse(ORMModel):
    id: int
    label: str
    data_type_id: int
    type: Optional[str] = None
    group_id: Optional[int] = None
    collection_id: Optional[int] = None
    status: Optional[bool] = None
    meta: Optional[Dict[str, Any]] = None
    is_required: bool = False
    created_at: datetime
    updated_at: datetime
