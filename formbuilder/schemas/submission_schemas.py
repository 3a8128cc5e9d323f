from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from .common import ORMModel

class AnswerRequest(BaseModel):
    form_field_id: Optional[int] = None
    answer: str = Field("", max_length=250)

class SubmitFormRequest(BaseModel):
    service_id: Optional[int] = None
    created_by: Optional[int] = None
    answers: List[AnswerRequest] = Field(..., min_length=1)

class FormAnswerRequest(AnswerRequest):
    submission_id: Optional[int] = None

class FormAnswerResponse(ORMModel):
    id: int
    form_field_id: Optional[int] = None
    answer: Optional[str] = None
    submission_id: Optional[int] = None

class SubmissionResponse(ORMModel):
    id: int
    service_id: Optional[int] = None
    created_by: Optional[int] = None
    created_on: datetime
    answers: List[FormAnswerResponse] = []
