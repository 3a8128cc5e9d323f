from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import submissions as crud
from formbuilder.schemas.submission_schemas import (
    SubmitFormRequest, SubmissionResponse,
    FormAnswerRequest, FormAnswerResponse
)
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/submission", tags=["submissions"])
answers_router = APIRouter(prefix="/answers", tags=["answers"])

@router.post("")
def submit_form(request: SubmitFormRequest, db: Session = Depends(get_db)):
    """Store a submission with all of its answers"""
    submission = crud.create_submission(request, db)
    return success_response(SubmissionResponse.model_validate(submission), "Form submitted successfully", status.HTTP_201_CREATED)

@router.get("")
def list_submissions(db: Session = Depends(get_db)):
    submissions = crud.list_submissions(db)
    return success_response([SubmissionResponse.model_validate(s) for s in submissions], "Submissions retrieved successfully")

@router.get("/service/{service_id}")
def list_submissions_by_service(service_id: int, db: Session = Depends(get_db)):
    """All submissions made for one service"""
    submissions = crud.list_submissions_by_service(service_id, db)
    return success_response([SubmissionResponse.model_validate(s) for s in submissions], "Submissions retrieved successfully")

@router.get("/{submission_id}")
def get_submission(submission_id: int, db: Session = Depends(get_db)):
    submission = crud.get_submission(submission_id, db)
    return success_response(SubmissionResponse.model_validate(submission), "Submission retrieved successfully")

@router.delete("/{submission_id}")
def delete_submission(submission_id: int, db: Session = Depends(get_db)):
    crud.delete_submission(submission_id, db)
    return success_response(message="Submission deleted successfully")


@answers_router.post("")
def create_answer(request: FormAnswerRequest, db: Session = Depends(get_db)):
    answer = crud.create_form_answer(request, db)
    return success_response(FormAnswerResponse.model_validate(answer), "Answer created successfully", status.HTTP_201_CREATED)

@answers_router.get("/{answer_id}")
def get_answer(answer_id: int, db: Session = Depends(get_db)):
    answer = crud.get_form_answer(answer_id, db)
    return success_response(FormAnswerResponse.model_validate(answer), "Answer retrieved successfully")

@answers_router.put("/{answer_id}")
def update_answer(answer_id: int, request: FormAnswerRequest, db: Session = Depends(get_db)):
    answer = crud.update_form_answer(answer_id, request, db)
    return success_response(FormAnswerResponse.model_validate(answer), "Answer updated successfully")

@answers_router.delete("/{answer_id}")
def delete_answer(answer_id: int, db: Session = Depends(get_db)):
    crud.delete_form_answer(answer_id, db)
    return success_response(message="Answer deleted successfully")
