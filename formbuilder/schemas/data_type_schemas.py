from pydantic import BaseModel, Field
from .common import ORMModel

class DataTypeRequest(BaseModel):
    data_type: str = Field(..., min_length=1, max_length=50)

class DataTypeResponse(ORMModel):
    id: int
    data_type: str
