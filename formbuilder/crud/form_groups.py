from typing import List
from sqlalchemy.orm import Session
from ..models.form_group import FormGroup
from ..schemas.form_group_schemas import FormGroupRequest
from .base import get_or_404, commit

def create_form_group(request: FormGroupRequest, db: Session) -> FormGroup:
    form_group = FormGroup(
        group_name=request.group_name,
        group_span=request.group_span,
        group_row=request.group_row,
    )
    db.add(form_group)
    commit(db, "creating form group")
    db.refresh(form_group)
    return form_group

def get_form_group(form_group_id: int, db: Session) -> FormGroup:
    return get_or_404(db, FormGroup, form_group_id, "Form group")

def list_form_groups(db: Session) -> List[FormGroup]:
    return db.query(FormGroup).order_by(FormGroup.id).all()

def update_form_group(form_group_id: int, request: FormGroupRequest, db: Session) -> FormGroup:
    form_group = get_or_404(db, FormGroup, form_group_id, "Form group")
    form_group.group_name = request.group_name
    form_group.group_span = request.group_span
    form_group.group_row = request.group_row
    commit(db, "updating form group")
    db.refresh(form_group)
    return form_group

def delete_form_group(form_group_id: int, db: Session) -> None:
    form_group = get_or_404(db, FormGroup, form_group_id, "Form group")
    db.delete(form_group)
    commit(db, "deleting form group")
