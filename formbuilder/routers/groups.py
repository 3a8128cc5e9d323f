from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import groups as crud
from formbuilder.schemas.group_schemas import (
    GroupRequest, GroupResponse, AddFieldsToGroupRequest, GroupFieldResponse
)
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/groups", tags=["groups"])

# Fixed paths are declared before "/{group_id}" so they are matched first

@router.post("/add-fields")
def add_fields_to_group(request: AddFieldsToGroupRequest, db: Session = Depends(get_db)):
    """Move fields of a form into a group; every field must belong to the form"""
    crud.add_fields_to_group(request.form_id, request.group_id, request.field_ids, db)
    return success_response(message="Fields added to group successfully")

@router.get("/get-fields")
def get_group_fields(form_id: int, group_id: int, db: Session = Depends(get_db)):
    """Fields of a form that sit in the given group"""
    rows = crud.get_group_fields(form_id, group_id, db)
    return success_response([GroupFieldResponse.model_validate(r) for r in rows], "Group fields retrieved successfully")

@router.post("")
def create_group(request: GroupRequest, db: Session = Depends(get_db)):
    group = crud.create_group(request, db)
    return success_response(GroupResponse.model_validate(group), "Group created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_groups(db: Session = Depends(get_db)):
    groups = crud.list_groups(db)
    return success_response([GroupResponse.model_validate(g) for g in groups], "Groups retrieved successfully")

@router.get("/{group_id}")
def get_group(group_id: int, db: Session = Depends(get_db)):
    group = crud.get_group(group_id, db)
    return success_response(GroupResponse.model_validate(group), "Group retrieved successfully")

@router.put("/{group_id}")
def update_group(group_id: int, request: GroupRequest, db: Session = Depends(get_db)):
    group = crud.update_group(group_id, request, db)
    return success_response(GroupResponse.model_validate(group), "Group updated successfully")

@router.delete("/{group_id}")
def delete_group(group_id: int, db: Session = Depends(get_db)):
    crud.delete_group(group_id, db)
    return success_response(message="Group deleted successfully")
