from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud.forms import (
    create_form_db, get_form_by_id_db, get_all_forms_db,
    update_form_db, update_form_status_db, delete_form_db
)
from formbuilder.schemas.form_schemas import (
    FormCreateRequest, FormUpdateRequest, FormStatusRequest,
    FormResponse, FormWithFieldsResponse
)
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/forms", tags=["forms"])

@router.post("")
def create_form(request: FormCreateRequest, db: Session = Depends(get_db)):
    """Create a new form, optionally binding existing fields to it"""
    form = create_form_db(request, db)
    result = FormWithFieldsResponse.model_validate(get_form_by_id_db(form.id, db))
    return success_response(result, "Form created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_forms(db: Session = Depends(get_db)):
    forms = get_all_forms_db(db)
    return success_response([FormResponse.model_validate(f) for f in forms], "Forms retrieved successfully")

@router.get("/{form_id}")
def get_form(form_id: int, db: Session = Depends(get_db)):
    """Get a form by ID together with its fields"""
    form = FormWithFieldsResponse.model_validate(get_form_by_id_db(form_id, db))
    return success_response(form, "Form retrieved successfully")

@router.put("/{form_id}")
def update_form(form_id: int, request: FormUpdateRequest, db: Session = Depends(get_db)):
    form = update_form_db(form_id, request, db)
    return success_response(FormResponse.model_validate(form), "Form updated successfully")

@router.patch("/{form_id}/status")
def update_form_status(form_id: int, request: FormStatusRequest, db: Session = Depends(get_db)):
    """Switch a form on or off"""
    form = update_form_status_db(form_id, request.status, db)
    return success_response(FormResponse.model_validate(form), "Form status updated successfully")

@router.delete("/{form_id}")
def delete_form(form_id: int, db: Session = Depends(get_db)):
    delete_form_db(form_id, db)
    return success_response(message="Form deleted successfully")
