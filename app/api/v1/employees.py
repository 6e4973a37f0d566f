"""
Employee API Router
===================
Endpoints:
  - GET /employees - employee names, alphabetically
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.crud import employee as crud_employee

# Create router for employee endpoints
router = APIRouter()


@router.get("/", response_model=List[str])
def list_employees(db: Session = Depends(get_db)):
    """
    Get all employee names.

    Returns:
      ["Alice", "Bob", ...]
    """
    return crud_employee.get_names(db)
