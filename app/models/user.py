from sqlalchemy import Column, DateTime, Integer, String, func

from app.database import Base


class User(Base):
    """Account allowed to log in to the API"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
