from sqlalchemy import Column, Integer, String

from app.database import Base


class Employee(Base):
    """
    Employee directory.

    Salary periods reference employees by name (employee_name), not by id.
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
