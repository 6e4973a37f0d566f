"""
Health Check API
"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.database import get_db

router = APIRouter()


@router.get("/health_check", response_class=PlainTextResponse)
def health_check(db: Session = Depends(get_db)):
    """
    Public health check: OK once the database answers.
    A database failure surfaces as 500 "Database error".
    """
    db.execute(text("SELECT 1"))
    return "OK"
