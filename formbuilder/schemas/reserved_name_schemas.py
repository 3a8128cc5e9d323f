from pydantic import BaseModel, Field
from .common import ORMModel

class ReservedNameRequest(BaseModel):
    reserved_name: str = Field(..., min_length=1, max_length=50)

class ReservedNameResponse(ORMModel):
    id: int
    reserved_name: str
