"""Repository for user persistence and retrieval."""
from __future__ import annotations

from sqlalchemy.orm import Session

from tweetforge.models.user import User
from tweetforge.schemas.auth import UserCreate


class UserRepository:
    def create_user(self, db: Session, user_create: UserCreate) -> User:
        user = User(username=user_create.username, password=user_create.password)
        try:
            db.add(user)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(user)
        return user

    def get_by_id(self, db: Session, user_id: str) -> User | None:
        return db.query(User).filter(User.id == user_id).first()

    def get_by_username(self, db: Session, username: str) -> User | None:
        return db.query(User).filter(User.username == username).first()
