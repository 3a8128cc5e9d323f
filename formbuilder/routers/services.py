from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import services as crud
from formbuilder.schemas.service_schemas import ServiceRequest, ServiceResponse
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/services", tags=["services"])

@router.post("")
def create_service(request: ServiceRequest, db: Session = Depends(get_db)):
    service = crud.create_service(request, db)
    return success_response(ServiceResponse.model_validate(service), "Service created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_services(db: Session = Depends(get_db)):
    services = crud.list_services(db)
    return success_response([ServiceResponse.model_validate(s) for s in services], "Services retrieved successfully")

@router.get("/{service_id}")
def get_service(service_id: int, db: Session = Depends(get_db)):
    service = crud.get_service(service_id, db)
    return success_response(ServiceResponse.model_validate(service), "Service retrieved successfully")

@router.put("/{service_id}")
def update_service(service_id: int, request: ServiceRequest, db: Session = Depends(get_db)):
    service = crud.update_service(service_id, request, db)
    return success_response(ServiceResponse.model_validate(service), "Service updated successfully")

@router.delete("/{service_id}")
def delete_service(service_id: int, db: Session = Depends(get_db)):
    crud.delete_service(service_id, db)
    return success_response(message="Service deleted successfully")
