from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import reserved_names as crud
from formbuilder.schemas.reserved_name_schemas import ReservedNameRequest, ReservedNameResponse
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/reserved-name", tags=["reserved-name"])

@router.post("")
def create_reserved_name(request: ReservedNameRequest, db: Session = Depends(get_db)):
    reserved = crud.create_reserved_name(request, db)
    return success_response(ReservedNameResponse.model_validate(reserved), "Reserved name created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_reserved_names(db: Session = Depends(get_db)):
    names = crud.list_reserved_names(db)
    return success_response([ReservedNameResponse.model_validate(n) for n in names], "Reserved names retrieved successfully")

@router.get("/{name}")
def get_similar_names(name: str, db: Session = Depends(get_db)):
    """Reserved names containing the given text"""
    names = crud.get_similar_names(name, db)
    return success_response([ReservedNameResponse.model_validate(n) for n in names], "Reserved names retrieved successfully")

@router.delete("/{reserved_name_id}")
def delete_reserved_name(reserved_name_id: int, db: Session = Depends(get_db)):
    crud.delete_reserved_name(reserved_name_id, db)
    return success_response(message="Reserved name deleted")
