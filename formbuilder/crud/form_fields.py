import logging
from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..models.field import Field
from ..models.form import Form
from ..models.form_field import FormField
from ..models.form_group import FormGroup
from ..models.group import Group
from ..schemas.form_field_schemas import FormFieldRequest
from .base import get_or_404, commit, storage_error

logger = logging.getLogger(__name__)

def get_active_form(form_id: int, db: Session) -> Form:
    """Load a form that has not been soft-deleted"""
    form = (
        db.query(Form)
        .filter(Form.id == form_id, Form.deleted_at.is_(None))
        .first()
    )
    if not form:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Form not found")
    return form

def field_projection(form_field: FormField) -> Optional[Dict[str, Any]]:
    """
    Flatten a form-field binding together with its field definition

    Returns None when the binding points at a field that no longer exists;
    callers skip those rows rather than failing the whole read.
    """
    field = form_field.field
    if field is None:
        logger.warning(
            f"Skipping form field {form_field.id}: field {form_field.field_id} does not resolve"
        )
        return None
    return {
        "id": form_field.id,
        "form_id": form_field.form_id,
        "field_id": form_field.field_id,
        "field_name": form_field.field_name,
        "group_id": form_field.group_id,
        "form_group_id": form_field.form_group_id,
        "label": field.label,
        "type": field.type,
        "meta": field.meta,
        "is_required": field.is_required,
        "validation": form_field.validation,
        "field_span": form_field.field_span,
        "field_row": form_field.field_row,
        "created_at": form_field.created_at,
        "updated_at": form_field.updated_at,
    }

def _check_references(request: FormFieldRequest, db: Session) -> None:
    get_active_form(request.form_id, db)
    get_or_404(db, Field, request.field_id, "Field")
    if request.group_id is not None:
        get_or_404(db, Group, request.group_id, "Group")
    if request.form_group_id is not None:
        get_or_404(db, FormGroup, request.form_group_id, "Form group")

def _new_form_field(request: FormFieldRequest) -> FormField:
    return FormField(
        form_id=request.form_id,
        field_id=request.field_id,
        field_name=request.field_name,
        validation=request.validation,
        field_span=request.field_span,
        field_row=request.field_row,
        group_id=request.group_id,
        form_group_id=request.form_group_id,
    )

def create_form_field(request: FormFieldRequest, db: Session) -> FormField:
    _check_references(request, db)
    form_field = _new_form_field(request)
    db.add(form_field)
    commit(db, "creating form field")
    db.refresh(form_field)
    return form_field

def create_multiple_form_fields(requests: List[FormFieldRequest], db: Session) -> List[FormField]:
    """Bind several fields at once; any bad entry aborts the whole batch"""
    created = []
    try:
        for request in requests:
            _check_references(request, db)
            form_field = _new_form_field(request)
            db.add(form_field)
            created.append(form_field)
        db.commit()
    except HTTPException:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        raise storage_error(db, "creating form fields", e)
    for form_field in created:
        db.refresh(form_field)
    return created

def get_form_field(form_field_id: int, db: Session) -> FormField:
    """Load a binding whose form has not been soft-deleted"""
    form_field = (
        db.query(FormField)
        .join(Form, FormField.form_id == Form.id)
        .filter(FormField.id == form_field_id, Form.deleted_at.is_(None))
        .first()
    )
    if not form_field:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Form field not found")
    return form_field

def list_form_fields(db: Session, form_id: Optional[int] = None) -> List[FormField]:
    query = (
        db.query(FormField)
        .join(Form, FormField.form_id == Form.id)
        .filter(Form.deleted_at.is_(None))
    )
    if form_id is not None:
        query = query.filter(FormField.form_id == form_id)
    return query.order_by(FormField.id).all()

def update_form_field(form_field_id: int, request: FormFieldRequest, db: Session) -> FormField:
    form_field = get_form_field(form_field_id, db)
    _check_references(request, db)
    form_field.form_id = request.form_id
    form_field.field_id = request.field_id
    form_field.field_name = request.field_name
    form_field.validation = request.validation
    form_field.field_span = request.field_span
    form_field.field_row = request.field_row
    form_field.group_id = request.group_id
    form_field.form_group_id = request.form_group_id
    commit(db, "updating form field")
    db.refresh(form_field)
    return form_field

def delete_form_field(form_field_id: int, db: Session) -> None:
    """Remove a binding; answers given to it keep their text but lose the link"""
    form_field = get_form_field(form_field_id, db)
    db.delete(form_field)
    commit(db, "deleting form field")
