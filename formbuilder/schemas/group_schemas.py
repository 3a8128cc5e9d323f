from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from .common import ORMModel

class GroupRequest(BaseModel):
    group_name: str = Field(..., min_length=1, max_length=50)

class GroupResponse(ORMModel):
    id: int
    group_name: str
    created_at: datetime
    updated_at: datetime

class AddFieldsToGroupRequest(BaseModel):
    form_id: int
    group_id: int
    field_ids: List[int] = Field(..., min_length=1)

class GroupFieldResponse(BaseModel):
    """One form-field binding flattened together with its field definition"""
    id: int
    form_id: int
    field_id: int
    group_id: Optional[int] = None
    label: str
    type: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    is_required: bool = False
    validation: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime
