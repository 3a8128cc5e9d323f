from typing import List
from sqlalchemy.orm import Session
from ..models.reserved_name import ReservedName
from ..schemas.reserved_name_schemas import ReservedNameRequest
from ..utils.helpers import escape_like
from .base import get_or_404, commit

def create_reserved_name(request: ReservedNameRequest, db: Session) -> ReservedName:
    reserved = ReservedName(reserved_name=request.reserved_name)
    db.add(reserved)
    commit(db, "creating reserved name")
    db.refresh(reserved)
    return reserved

def list_reserved_names(db: Session) -> List[ReservedName]:
    return db.query(ReservedName).order_by(ReservedName.id).all()

def get_similar_names(name: str, db: Session) -> List[ReservedName]:
    """
    Find reserved names containing the given text

    Plain substring match, no ranking. Wildcards in the input are escaped.
    """
    pattern = f"%{escape_like(name)}%"
    return (
        db.query(ReservedName)
        .filter(ReservedName.reserved_name.like(pattern, escape="\\"))
        .all()
    )

def delete_reserved_name(reserved_name_id: int, db: Session) -> None:
    reserved = get_or_404(db, ReservedName, reserved_name_id, "Reserved name")
    db.delete(reserved)
    commit(db, "deleting reserved name")
