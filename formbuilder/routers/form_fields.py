from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import form_fields as crud
from formbuilder.schemas.form_field_schemas import FormFieldRequest, FormFieldResponse
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/form-fields", tags=["form-fields"])

@router.post("")
def create_form_field(request: FormFieldRequest, db: Session = Depends(get_db)):
    """Bind a field to a form"""
    form_field = crud.create_form_field(request, db)
    return success_response(FormFieldResponse.model_validate(form_field), "Form field created successfully", status.HTTP_201_CREATED)

@router.post("/multiple")
def create_multiple_form_fields(requests: List[FormFieldRequest], db: Session = Depends(get_db)):
    """Bind several fields in one go; nothing is stored if one of them fails"""
    created = crud.create_multiple_form_fields(requests, db)
    return success_response([FormFieldResponse.model_validate(f) for f in created], "Form fields created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_form_fields(form_id: Optional[int] = None, db: Session = Depends(get_db)):
    form_fields = crud.list_form_fields(db, form_id)
    return success_response([FormFieldResponse.model_validate(f) for f in form_fields], "Form fields retrieved successfully")

@router.get("/{form_field_id}")
def get_form_field(form_field_id: int, db: Session = Depends(get_db)):
    form_field = crud.get_form_field(form_field_id, db)
    return success_response(FormFieldResponse.model_validate(form_field), "Form field retrieved successfully")

@router.put("/{form_field_id}")
def update_form_field(form_field_id: int, request: FormFieldRequest, db: Session = Depends(get_db)):
    form_field = crud.update_form_field(form_field_id, request, db)
    return success_response(FormFieldResponse.model_validate(form_field), "Form field updated successfully")

@router.delete("/{form_field_id}")
def delete_form_field(form_field_id: int, db: Session = Depends(get_db)):
    crud.delete_form_field(form_field_id, db)
    return success_response(message="Form field deleted successfully")
