from typing import List
from sqlalchemy.orm import Session
from ..models.service import Service
from ..schemas.service_schemas import ServiceRequest
from .base import get_or_404, commit

def create_service(request: ServiceRequest, db: Session) -> Service:
    service = Service(service_name=request.service_name)
    db.add(service)
    commit(db, "creating service")
    db.refresh(service)
    return service

def get_service(service_id: int, db: Session) -> Service:
    return get_or_404(db, Service, service_id, "Service")

def list_services(db: Session) -> List[Service]:
    return db.query(Service).order_by(Service.id).all()

def update_service(service_id: int, request: ServiceRequest, db: Session) -> Service:
    service = get_or_404(db, Service, service_id, "Service")
    service.service_name = request.service_name
    commit(db, "updating service")
    db.refresh(service)
    return service

def delete_service(service_id: int, db: Session) -> None:
    service = get_or_404(db, Service, service_id, "Service")
    db.delete(service)
    commit(db, "deleting service")
