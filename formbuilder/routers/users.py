from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from formbuilder.db.session import get_db
from formbuilder.crud import users as crud
from formbuilder.schemas.user_schemas import UserRequest, UserResponse
from formbuilder.utils.helpers import success_response

router = APIRouter(prefix="/users", tags=["users"])

@router.post("")
def create_user(request: UserRequest, db: Session = Depends(get_db)):
    """Create a new user"""
    user = crud.create_user(request, db)
    return success_response(UserResponse.model_validate(user), "User created successfully", status.HTTP_201_CREATED)

@router.get("")
def list_users(db: Session = Depends(get_db)):
    users = crud.list_users(db)
    return success_response([UserResponse.model_validate(u) for u in users], "Users retrieved successfully")

@router.get("/email/{email}")
def get_user_by_email(email: str, db: Session = Depends(get_db)):
    """Look a user up by email address"""
    user = crud.get_user_by_email(email, db)
    return success_response(UserResponse.model_validate(user), "User retrieved successfully")

@router.get("/{user_id}")
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = crud.get_user(user_id, db)
    return success_response(UserResponse.model_validate(user), "User retrieved successfully")

@router.put("/{user_id}")
def update_user(user_id: int, request: UserRequest, db: Session = Depends(get_db)):
    """Replace a user's details"""
    user = crud.update_user(user_id, request, db)
    return success_response(UserResponse.model_validate(user), "User updated successfully")

@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    crud.delete_user(user_id, db)
    return success_response(message="User deleted successfully")
