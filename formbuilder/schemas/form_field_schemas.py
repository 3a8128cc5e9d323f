from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime
from .common import ORMModel

class FormFieldRequest(BaseModel):
    form_id: int
    field_id: int
    field_name: Optional[str] = Field(None, max_length=50)
    validation: Optional[Dict[str, Any]] = None
    field_span: Optional[int] = None
    field_row: Optional[int] = None
    group_id: Optional[int] = None
    form_group_id: Optional[int] = None

class FormFieldResponse(ORMModel):
    id: int
    form_id: int
    field_id: int
    field_name: Optional[str] = None
    validation: Optional[Dict[str, Any]] = None
    field_span: Optional[int] = None
    field_row: Optional[int] = None
    group_id: Optional[int] = None
    form_group_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
