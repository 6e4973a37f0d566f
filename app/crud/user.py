from typing import Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.security import get_password_hash
from app.crud.base import CRUDBase
from app.models.user import User


class CRUDUser(CRUDBase[User, BaseModel]):

    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        """SQL equivalent: SELECT * FROM users WHERE username = ?"""
        return db.query(User).filter(User.username == username).first()

    def create_with_password(self, db: Session, *, username: str, password: str) -> User:
        return self.save(db, User(username=username, password_hash=get_password_hash(password)))


user = CRUDUser(User)
