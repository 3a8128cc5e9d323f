from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from ..models.data_type import DataType
from ..models.field import Field
from ..models.form import Form
from ..schemas.data_type_schemas import DataTypeRequest
from .base import get_or_404, commit

def create_data_type(request: DataTypeRequest, db: Session) -> DataType:
    data_type = DataType(data_type=request.data_type)
    db.add(data_type)
    commit(db, "creating data type")
    db.refresh(data_type)
    return data_type

def get_data_type(data_type_id: int, db: Session) -> DataType:
    return get_or_404(db, DataType, data_type_id, "Data type")

def list_data_types(db: Session) -> List[DataType]:
    return db.query(DataType).order_by(DataType.id).all()

def update_data_type(data_type_id: int, request: DataTypeRequest, db: Session) -> DataType:
    data_type = get_or_404(db, DataType, data_type_id, "Data type")
    data_type.data_type = request.data_type
    commit(db, "updating data type")
    db.refresh(data_type)
    return data_type

def delete_data_type(data_type_id: int, db: Session) -> None:
    data_type = get_or_404(db, DataType, data_type_id, "Data type")
    # Soft-deleted forms still hold the foreign key, so they count too
    for model, owner in ((Field, "fields"), (Form, "forms")):
        in_use = db.query(model.id).filter(model.data_type_id == data_type_id).first()
        if in_use:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Data type {data_type_id} is still used by {owner}"
            )
    db.delete(data_type)
    commit(db, "deleting data type")
