import logging
from typing import Any, Dict, List
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..models.form_field import FormField
from ..models.group import Group
from ..schemas.group_schemas import GroupRequest
from .base import get_or_404, commit, storage_error
from .form_fields import get_active_form, field_projection

logger = logging.getLogger(__name__)

def create_group(request: GroupRequest, db: Session) -> Group:
    group = Group(group_name=request.group_name)
    db.add(group)
    commit(db, "creating group")
    db.refresh(group)
    return group

def get_group(group_id: int, db: Session) -> Group:
    return get_or_404(db, Group, group_id, "Group")

def list_groups(db: Session) -> List[Group]:
    return db.query(Group).order_by(Group.id).all()

def update_group(group_id: int, request: GroupRequest, db: Session) -> Group:
    group = get_or_404(db, Group, group_id, "Group")
    group.group_name = request.group_name
    commit(db, "updating group")
    db.refresh(group)
    return group

def delete_group(group_id: int, db: Session) -> None:
    """Delete a group; fields and bindings that were in it become ungrouped"""
    group = get_or_404(db, Group, group_id, "Group")
    db.delete(group)
    commit(db, "deleting group")

def add_fields_to_group(form_id: int, group_id: int, field_ids: List[int], db: Session) -> None:
    """
    Move fields of one form into a group, all or nothing

    Every id in field_ids must be bound to the form through form_fields,
    otherwise nothing is updated. The membership check and the bulk update
    share one transaction and the matching rows are locked for its duration.

    Parameters:
    - form_id: Form whose bindings are reassigned
    - group_id: Target group
    - field_ids: Field ids to move
    - db: Database session
    """
    wanted = set(field_ids)
    get_active_form(form_id, db)
    get_or_404(db, Group, group_id, "Group")

    scope = (FormField.form_id == form_id, FormField.field_id.in_(sorted(wanted)))
    try:
        bound = db.query(FormField).filter(*scope).with_for_update().all()
        bound_ids = {row.field_id for row in bound}
        if not wanted.issubset(bound_ids):
            db.rollback()
            missing = sorted(wanted - bound_ids)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Fields {missing} do not belong to form {form_id}"
            )

        updated = (
            db.query(FormField)
            .filter(*scope)
            .update({FormField.group_id: group_id}, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        raise storage_error(db, "adding fields to group", e)
    logger.info(f"Moved {updated} form fields of form {form_id} into group {group_id}")

def get_group_fields(form_id: int, group_id: int, db: Session) -> List[Dict[str, Any]]:
    """
    List the fields of a form that sit in a group

    Bindings whose field cannot be resolved are skipped.
    """
    get_active_form(form_id, db)
    rows = (
        db.query(FormField)
        .filter(FormField.form_id == form_id, FormField.group_id == group_id)
        .order_by(FormField.id)
        .all()
    )
    results = []
    for form_field in rows:
        projection = field_projection(form_field)
        if projection is not None:
            results.append(projection)
    return results
