from typing import List
from sqlalchemy.orm import Session
from ..models.collection import Collection, CollectionItem
from ..schemas.collection_schemas import CollectionRequest, CollectionItemRequest
from .base import get_or_404, commit

def create_collection(request: CollectionRequest, db: Session) -> Collection:
    collection = Collection(collection_name=request.collection_name)
    db.add(collection)
    commit(db, "creating collection")
    db.refresh(collection)
    return collection

def get_collection(collection_id: int, db: Session) -> Collection:
    return get_or_404(db, Collection, collection_id, "Collection")

def list_collections(db: Session) -> List[Collection]:
    return db.query(Collection).order_by(Collection.id).all()

def update_collection(collection_id: int, request: CollectionRequest, db: Session) -> Collection:
    collection = get_or_404(db, Collection, collection_id, "Collection")
    collection.collection_name = request.collection_name
    commit(db, "updating collection")
    db.refresh(collection)
    return collection

def delete_collection(collection_id: int, db: Session) -> None:
    """Delete a collection; its items and fields are detached, not removed"""
    collection = get_or_404(db, Collection, collection_id, "Collection")
    db.delete(collection)
    commit(db, "deleting collection")

def list_collection_items(collection_id: int, db: Session) -> List[CollectionItem]:
    get_or_404(db, Collection, collection_id, "Collection")
    return (
        db.query(CollectionItem)
        .filter(CollectionItem.collection_id == collection_id)
        .order_by(CollectionItem.id)
        .all()
    )

def _check_item_references(request: CollectionItemRequest, db: Session) -> None:
    if request.collection_id is not None:
        get_or_404(db, Collection, request.collection_id, "Collection")
    if request.relation_collection_items_id is not None:
        get_or_404(db, CollectionItem, request.relation_collection_items_id, "Related collection item")

def create_collection_item(request: CollectionItemRequest, db: Session) -> CollectionItem:
    _check_item_references(request, db)
    item = CollectionItem(
        collection_id=request.collection_id,
        collection_item=request.collection_item,
        relation_collection_items_id=request.relation_collection_items_id,
    )
    db.add(item)
    commit(db, "creating collection item")
    db.refresh(item)
    return item

def get_collection_item(item_id: int, db: Session) -> CollectionItem:
    return get_or_404(db, CollectionItem, item_id, "Collection item")

def list_all_collection_items(db: Session) -> List[CollectionItem]:
    return db.query(CollectionItem).order_by(CollectionItem.id).all()

def update_collection_item(item_id: int, request: CollectionItemRequest, db: Session) -> CollectionItem:
    item = get_or_404(db, CollectionItem, item_id, "Collection item")
    _check_item_references(request, db)
    item.collection_id = request.collection_id
    item.collection_item = request.collection_item
    item.relation_collection_items_id = request.relation_collection_items_id
    commit(db, "updating collection item")
    db.refresh(item)
    return item

def delete_collection_item(item_id: int, db: Session) -> None:
    item = get_or_404(db, CollectionItem, item_id, "Collection item")
    # Items pointing at this one lose their relation instead of dangling
    db.query(CollectionItem).filter(
        CollectionItem.relation_collection_items_id == item_id
    ).update({CollectionItem.relation_collection_items_id: None}, synchronize_session=False)
    db.delete(item)
    commit(db, "deleting collection item")
