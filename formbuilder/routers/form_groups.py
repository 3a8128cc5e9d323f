from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import form_groups as crud
from formbuilder.schemas.form_group_schemas import FormGroupRequest, FormGroupResponse
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/form-groups", tags=["form-groups"])

@router.post("")
def create_form_group(request: FormGroupRequest, db: Session = Depends(get_db)):
    form_group = crud.create_form_group(request, db)
    return success_response(FormGroupResponse.model_validate(form_group), "Form group created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_form_groups(db: Session = Depends(get_db)):
    form_groups = crud.list_form_groups(db)
    return success_response([FormGroupResponse.model_validate(g) for g in form_groups], "Form groups retrieved successfully")

@router.get("/{form_group_id}")
def get_form_group(form_group_id: int, db: Session = Depends(get_db)):
    form_group = crud.get_form_group(form_group_id, db)
    return success_response(FormGroupResponse.model_validate(form_group), "Form group retrieved successfully")

@router.put("/{form_group_id}")
def update_form_group(form_group_id: int, request: FormGroupRequest, db: Session = Depends(get_db)):
    form_group = crud.update_form_group(form_group_id, request, db)
    return success_response(FormGroupResponse.model_validate(form_group), "Form group updated successfully")

@router.delete("/{form_group_id}")
def delete_form_group(form_group_id: int, db: Session = Depends(get_db)):
    crud.delete_form_group(form_group_id, db)
    return success_response(message="Form group deleted successfully")
