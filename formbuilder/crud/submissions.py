from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from fastapi import HTTPException, status
from ..models.form_field import FormField
from ..models.service import Service
from ..models.submission import Submission, FormAnswer
from ..models.user import User
from ..schemas.submission_schemas import SubmitFormRequest, FormAnswerRequest
from .base import get_or_404, commit, storage_error

def create_submission(request: SubmitFormRequest, db: Session) -> Submission:
    """
    Store a submission and all of its answers in one transaction

    Parameters:
    - request: SubmitFormRequest object
    - db: Database session

    Returns:
    - The new submission with its answers attached
    """
    if request.service_id is not None:
        get_or_404(db, Service, request.service_id, "Service")
    if request.created_by is not None:
        get_or_404(db, User, request.created_by, "User")

    try:
        submission = Submission(
            service_id=request.service_id,
            created_by=request.created_by,
        )
        db.add(submission)
        db.flush()

        for answer in request.answers:
            if answer.form_field_id is not None:
                get_or_404(db, FormField, answer.form_field_id, "Form field")
            submission.answers.append(FormAnswer(
                form_field_id=answer.form_field_id,
                answer=answer.answer,
                submission_id=submission.id,
            ))

        db.commit()
    except HTTPException:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        raise storage_error(db, "storing submission", e)
    db.refresh(submission)
    return submission

def get_submission(submission_id: int, db: Session) -> Submission:
    submission = (
        db.query(Submission)
        .options(selectinload(Submission.answers))
        .filter(Submission.id == submission_id)
        .first()
    )
    if not submission:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Submission not found")
    return submission

def list_submissions(db: Session) -> List[Submission]:
    return (
        db.query(Submission)
        .options(selectinload(Submission.answers))
        .order_by(Submission.id)
        .all()
    )

def list_submissions_by_service(service_id: int, db: Session) -> List[Submission]:
    return (
        db.query(Submission)
        .options(selectinload(Submission.answers))
        .filter(Submission.service_id == service_id)
        .order_by(Submission.id)
        .all()
    )

def delete_submission(submission_id: int, db: Session) -> None:
    """Delete a submission and, through the cascade, its answers"""
    submission = get_or_404(db, Submission, submission_id, "Submission")
    db.delete(submission)
    commit(db, "deleting submission")

def _check_answer_references(request: FormAnswerRequest, db: Session) -> None:
    if request.form_field_id is not None:
        get_or_404(db, FormField, request.form_field_id, "Form field")
    if request.submission_id is not None:
        get_or_404(db, Submission, request.submission_id, "Submission")

def create_form_answer(request: FormAnswerRequest, db: Session) -> FormAnswer:
    _check_answer_references(request, db)
    answer = FormAnswer(
        form_field_id=request.form_field_id,
        answer=request.answer,
        submission_id=request.submission_id,
    )
    db.add(answer)
    commit(db, "creating answer")
    db.refresh(answer)
    return answer

def get_form_answer(answer_id: int, db: Session) -> FormAnswer:
    return get_or_404(db, FormAnswer, answer_id, "Answer")

def update_form_answer(answer_id: int, request: FormAnswerRequest, db: Session) -> FormAnswer:
    answer = get_or_404(db, FormAnswer, answer_id, "Answer")
    _check_answer_references(request, db)
    answer.form_field_id = request.form_field_id
    answer.answer = request.answer
    answer.submission_id = request.submission_id
    commit(db, "updating answer")
    db.refresh(answer)
    return answer

def delete_form_answer(answer_id: int, db: Session) -> None:
    answer = get_or_404(db, FormAnswer, answer_id, "Answer")
    db.delete(answer)
    commit(db, "deleting answer")
