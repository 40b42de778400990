# pomoauth/models/user.py

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from sqlalchemy import Column, DateTime, Integer, String
from . import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Email is the login key; password always holds a bcrypt hash.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, nullable=False)
    password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


class UserOut(BaseModel):
    """
    Public view of a user. The password hash is never part of it.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    username: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
