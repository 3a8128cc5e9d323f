from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from .common import ORMModel

class FormFieldReference(BaseModel):
    field_id: int
    field_name: Optional[str] = Field(None, max_length=50)
    validation: Optional[Dict[str, Any]] = None
    field_span: Optional[int] = None
    field_row: Optional[int] = None

class FormCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    data_type_id: Optional[int] = None
    service_id: Optional[int] = None
    status: Optional[bool] = None
    fields: List[FormFieldReference] = []

class FormUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    data_type_id: Optional[int] = None
    service_id: Optional[int] = None
    status: Optional[bool] = None

class FormStatusRequest(BaseModel):
    status: bool

class FormResponse(ORMModel):
    id: int
    name: str
    description: Optional[str] = None
    data_type_id: Optional[int] = None
    service_id: Optional[int] = None
    status: Optional[bool] = None
    created_at: datetime
    updated_at: datetime

class FormFieldDetail(BaseModel):
    id: int
    field_id: int
    field_name: Optional[str] = None
    label: Optional[str] = None
    type: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    is_required: bool = False
    validation: Optional[Dict[str, Any]] = None
    field_span: Optional[int] = None
    field_row: Optional[int] = None
    group_id: Optional[int] = None
    form_group_id: Optional[int] = None

class FormWithFieldsResponse(FormResponse):
    fields: List[FormFieldDetail] = []
