from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import collections as crud
from formbuilder.schemas.collection_schemas import (
    CollectionRequest, CollectionResponse,
    CollectionItemRequest, CollectionItemResponse
)
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/collections", tags=["collections"])
items_router = APIRouter(prefix="/collection-items", tags=["collection-items"])

@router.post("")
def create_collection(request: CollectionRequest, db: Session = Depends(get_db)):
    collection = crud.create_collection(request, db)
    return success_response(CollectionResponse.model_validate(collection), "Collection created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_collections(db: Session = Depends(get_db)):
    collections = crud.list_collections(db)
    return success_response([CollectionResponse.model_validate(c) for c in collections], "Collections retrieved successfully")

@router.get("/{collection_id}")
def get_collection(collection_id: int, db: Session = Depends(get_db)):
    collection = crud.get_collection(collection_id, db)
    return success_response(CollectionResponse.model_validate(collection), "Collection retrieved successfully")

@router.get("/{collection_id}/items")
def list_collection_items(collection_id: int, db: Session = Depends(get_db)):
    """All items of one collection"""
    items = crud.list_collection_items(collection_id, db)
    return success_response([CollectionItemResponse.model_validate(i) for i in items], "Collection items retrieved successfully")

@router.put("/{collection_id}")
def update_collection(collection_id: int, request: CollectionRequest, db: Session = Depends(get_db)):
    collection = crud.update_collection(collection_id, request, db)
    return success_response(CollectionResponse.model_validate(collection), "Collection updated successfully")

@router.delete("/{collection_id}")
def delete_collection(collection_id: int, db: Session = Depends(get_db)):
    crud.delete_collection(collection_id, db)
    return success_response(message="Collection deleted successfully")


@items_router.post("")
def create_collection_item(request: CollectionItemRequest, db: Session = Depends(get_db)):
    item = crud.create_collection_item(request, db)
    return success_response(CollectionItemResponse.model_validate(item), "Collection item created successfully", status.HTTP_201_CREATED)

@items_router.get("")
def list_all_collection_items(db: Session = Depends(get_db)):
    items = crud.list_all_collection_items(db)
    return success_response([CollectionItemResponse.model_validate(i) for i in items], "Collection items retrieved successfully")

@items_router.get("/{item_id}")
def get_collection_item(item_id: int, db: Session = Depends(get_db)):
    item = crud.get_collection_item(item_id, db)
    return success_response(CollectionItemResponse.model_validate(item), "Collection item retrieved successfully")

@items_router.put("/{item_id}")
def update_collection_item(item_id: int, request: CollectionItemRequest, db: Session = Depends(get_db)):
    item = crud.update_collection_item(item_id, request, db)
    return success_response(CollectionItemResponse.model_validate(item), "Collection item updated successfully")

@items_router.delete("/{item_id}")
def delete_collection_item(item_id: int, db: Session = Depends(get_db)):
    crud.delete_collection_item(item_id, db)
    return success_response(message="Collection item deleted successfully")
