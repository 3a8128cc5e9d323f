from pydantic import BaseModel, Field
from .common import ORMModel

class ServiceRequest(BaseModel):
    service_name: str = Field(..., min_length=1, max_length=100)

class ServiceResponse(ORMModel):
    id: int
    service_name: str
