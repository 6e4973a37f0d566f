"""
Employee CRUD Operations
========================
Extends the base CRUD class with Employee-specific queries.
"""

from typing import List
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.employee import Employee


class CRUDEmployee(CRUDBase[Employee, BaseModel]):
    """
    CRUD operations for Employee model.
    Inherits standard operations from CRUDBase.
    """

    def get_names(self, db: Session) -> List[str]:
        """
        All employee names, alphabetically.

        SQL equivalent: SELECT name FROM employees ORDER BY name
        """
        rows = db.query(Employee.name).order_by(Employee.name).all()
        return [row.name for row in rows]


# Create a global instance to use throughout the app
employee = CRUDEmployee(Employee)
