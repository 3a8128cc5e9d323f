from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import data_types as crud
from formbuilder.schemas.data_type_schemas import DataTypeRequest, DataTypeResponse
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/data-types", tags=["data-types"])

@router.post("")
def create_data_type(request: DataTypeRequest, db: Session = Depends(get_db)):
    data_type = crud.create_data_type(request, db)
    return success_response(DataTypeResponse.model_validate(data_type), "Data type created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_data_types(db: Session = Depends(get_db)):
    data_types = crud.list_data_types(db)
    return success_response([DataTypeResponse.model_validate(d) for d in data_types], "Data types retrieved successfully")

@router.get("/{data_type_id}")
def get_data_type(data_type_id: int, db: Session = Depends(get_db)):
    data_type = crud.get_data_type(data_type_id, db)
    return success_response(DataTypeResponse.model_validate(data_type), "Data type retrieved successfully")

@router.put("/{data_type_id}")
def update_data_type(data_type_id: int, request: DataTypeRequest, db: Session = Depends(get_db)):
    data_type = crud.update_data_type(data_type_id, request, db)
    return success_response(DataTypeResponse.model_validate(data_type), "Data type updated successfully")

@router.delete("/{data_type_id}")
def delete_data_type(data_type_id: int, db: Session = Depends(get_db)):
    """Delete a data type no field uses any more"""
    crud.delete_data_type(data_type_id, db)
    return success_response(message="Data type deleted successfully")
