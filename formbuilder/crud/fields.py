from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from ..models.collection import Collection
from ..models.data_type import DataType
from ..models.field import Field
from ..models.form_field import FormField
from ..models.group import Group
from ..schemas.field_schemas import FieldRequest
from .base import get_or_404, commit

def _check_field_references(request: FieldRequest, db: Session) -> None:
    get_or_404(db, DataType, request.data_type_id, "Data type")
    if request.group_id is not None:
        get_or_404(db, Group, request.group_id, "Group")
    if request.collection_id is not None:
        get_or_404(db, Collection, request.collection_id, "Collection")

def create_field(request: FieldRequest, db: Session) -> Field:
    _check_field_references(request, db)
    field = Field(
        label=request.label,
        data_type_id=request.data_type_id,
        group_id=request.group_id,
        collection_id=request.collection_id,
        status=request.status,
        meta=request.meta,
        is_required=request.is_required,
    )
    db.add(field)
    commit(db, "creating field")
    db.refresh(field)
    return field

def get_field(field_id: int, db: Session) -> Field:
    return get_or_404(db, Field, field_id, "Field")

def list_fields(db: Session) -> List[Field]:
    return db.query(Field).order_by(Field.id).all()

def update_field(field_id: int, request: FieldRequest, db: Session) -> Field:
    field = get_or_404(db, Field, field_id, "Field")
    _check_field_references(request, db)
    field.label = request.label
    field.data_type_id = request.data_type_id
    field.group_id = request.group_id
    field.collection_id = request.collection_id
    field.status = request.status
    field.meta = request.meta
    field.is_required = request.is_required
    commit(db, "updating field")
    db.refresh(field)
    return field

def delete_field(field_id: int, db: Session) -> None:
    """Delete a field that is not bound to any form"""
    field = get_or_404(db, Field, field_id, "Field")
    bound = db.query(FormField.form_id).filter(FormField.field_id == field_id).first()
    if bound:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Field {field_id} is still bound to form {bound.form_id}"
        )
    db.delete(field)
    commit(db, "deleting field")
