from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from ..models.user import User
from ..schemas.user_schemas import UserRequest
from ..core.security import create_hashed_password
from .base import get_or_404, commit

def create_user(request: UserRequest, db: Session) -> User:
    user = User(
        first_name=request.first_name,
        middle_name=request.middle_name,
        surname=request.surname,
        dob=request.dob,
        email=request.email,
        hashed_password=create_hashed_password(request.password) if request.password else None,
    )
    db.add(user)
    commit(db, "creating user")
    db.refresh(user)
    return user

def get_user(user_id: int, db: Session) -> User:
    return get_or_404(db, User, user_id, "User")

def get_user_by_email(email: str, db: Session) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user

def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()

def update_user(user_id: int, request: UserRequest, db: Session) -> User:
    """Replace every mutable column; a missing password clears the stored one"""
    user = get_or_404(db, User, user_id, "User")
    user.first_name = request.first_name
    user.middle_name = request.middle_name
    user.surname = request.surname
    user.dob = request.dob
    user.email = request.email
    user.hashed_password = create_hashed_password(request.password) if request.password else None
    commit(db, "updating user")
    db.refresh(user)
    return user

def delete_user(user_id: int, db: Session) -> None:
    user = get_or_404(db, User, user_id, "User")
    db.delete(user)
    commit(db, "deleting user")
