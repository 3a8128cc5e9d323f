from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import fields as crud
from formbuilder.schemas.field_schemas import FieldRequest, FieldResponse
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/fields", tags=["fields"])

@router.post("")
def create_field(request: FieldRequest, db: Session = Depends(get_db)):
    """Create a new field with label, data type and metadata"""
    field = crud.create_field(request, db)
    return success_response(FieldResponse.model_validate(field), "Field created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_fields(db: Session = Depends(get_db)):
    fields = crud.list_fields(db)
    return success_response([FieldResponse.model_validate(f) for f in fields], "Fields retrieved successfully")

@router.get("/{field_id}")
def get_field(field_id: int, db: Session = Depends(get_db)):
    field = crud.get_field(field_id, db)
    return success_response(FieldResponse.model_validate(field), "Field retrieved successfully")

@router.put("/{field_id}")
def update_field(field_id: int, request: FieldRequest, db: Session = Depends(get_db)):
    field = crud.update_field(field_id, request, db)
    return success_response(FieldResponse.model_validate(field), "Field updated successfully")

@router.delete("/{field_id}")
def delete_field(field_id: int, db: Session = Depends(get_db)):
    """Delete a field; refused while any form still uses it"""
    crud.delete_field(field_id, db)
    return success_response(message="Field deleted successfully")
