# pomoauth/core/store.py

import logging
from typing import Any, Optional, Protocol
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from pomoauth.database import get_db
from pomoauth.models.user import User


logger = logging.getLogger(__name__)

LOOKUP_FIELDS = ("id", "email", "username")


class StoreError(Exception):
    """A write to the user store failed."""


class UserStore(Protocol):
    def create(self, email: str, username: str, password_hash: str) -> User: ...

    def find_by_field(self, field: str, value: Any) -> Optional[User]: ...


class SQLAlchemyUserStore:
    """
    User records backed by a SQLAlchemy session.
    Uniqueness of email is enforced by the database.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, username: str, password_hash: str) -> User:
        user = User(email=email, username=username, password=password_hash)
        try:
            self.db.add(user)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError("failed to insert user") from e
        self.db.refresh(user)
        return user

    def find_by_field(self, field: str, value: Any) -> Optional[User]:
        if field not in LOOKUP_FIELDS:
            raise ValueError(f"Unsupported lookup field: {field}")
        column = getattr(User, field)
        return self.db.query(User).filter(column == value).first()


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return SQLAlchemyUserStore(db)
