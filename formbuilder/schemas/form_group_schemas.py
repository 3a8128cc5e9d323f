from pydantic import BaseModel
from typing import Optional
from .common import ORMModel

class FormGroupRequest(BaseModel):
    group_name: str
    group_span: Optional[int] = None
    group_row: Optional[int] = None

class FormGroupResponse(ORMModel):
    id: int
    group_name: Optional[str] = None
    group_span: Optional[int] = None
    group_row: Optional[int] = None
