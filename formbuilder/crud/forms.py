from typing import Any, Dict, List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from fastapi import HTTPException
from ..models.data_type import DataType
from ..models.field import Field
from ..models.form import Form
from ..models.form_field import FormField
from ..models.service import Service
from ..schemas.form_schemas import FormCreateRequest, FormUpdateRequest
from ..utils.helpers import get_utc_now
from .base import get_or_404, commit, storage_error
from .form_fields import get_active_form, field_projection

def _check_form_references(request, db: Session) -> None:
    if request.data_type_id is not None:
        get_or_404(db, DataType, request.data_type_id, "Data type")
    if request.service_id is not None:
        get_or_404(db, Service, request.service_id, "Service")

def create_form_db(request: FormCreateRequest, db: Session) -> Form:
    """
    Create a new form and bind the requested fields to it

    Parameters:
    - request: FormCreateRequest object
    - db: Database session

    Returns:
    - The stored form; nothing is stored if any referenced field is missing
    """
    _check_form_references(request, db)
    try:
        new_form = Form(
            name=request.name,
            description=request.description,
            data_type_id=request.data_type_id,
            service_id=request.service_id,
            status=request.status,
        )
        db.add(new_form)
        db.flush()

        for reference in request.fields:
            get_or_404(db, Field, reference.field_id, "Field")
            db.add(FormField(
                form_id=new_form.id,
                field_id=reference.field_id,
                field_name=reference.field_name,
                validation=reference.validation,
                field_span=reference.field_span,
                field_row=reference.field_row,
            ))

        db.commit()
    except HTTPException:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        raise storage_error(db, "creating form", e)
    db.refresh(new_form)
    return new_form

def get_form_by_id_db(form_id: int, db: Session) -> Dict[str, Any]:
    """
    Retrieve a form together with its field bindings

    Parameters:
    - form_id: The ID of the form to retrieve
    - db: Database session

    Returns:
    - Dictionary with the form columns plus a "fields" list
    """
    form = get_active_form(form_id, db)
    fields = []
    for form_field in form.form_fields:
        projection = field_projection(form_field)
        if projection is not None:
            fields.append(projection)
    return {
        "id": form.id,
        "name": form.name,
        "description": form.description,
        "data_type_id": form.data_type_id,
        "service_id": form.service_id,
        "status": form.status,
        "created_at": form.created_at,
        "updated_at": form.updated_at,
        "fields": fields,
    }

def get_all_forms_db(db: Session) -> List[Form]:
    return (
        db.query(Form)
        .filter(Form.deleted_at.is_(None))
        .order_by(Form.id)
        .all()
    )

def update_form_db(form_id: int, request: FormUpdateRequest, db: Session) -> Form:
    form = get_active_form(form_id, db)
    _check_form_references(request, db)
    form.name = request.name
    form.description = request.description
    form.data_type_id = request.data_type_id
    form.service_id = request.service_id
    form.status = request.status
    commit(db, "updating form")
    db.refresh(form)
    return form

def update_form_status_db(form_id: int, form_status: bool, db: Session) -> Form:
    form = get_active_form(form_id, db)
    form.status = form_status
    commit(db, "updating form status")
    db.refresh(form)
    return form

def delete_form_db(form_id: int, db: Session) -> None:
    """Soft delete: the row and its bindings stay, reads stop seeing it"""
    form = get_active_form(form_id, db)
    form.deleted_at = get_utc_now()
    commit(db, "deleting form")
