"""
SQLAlchemy models.

Importing this package registers every table on Base.metadata.
"""
from app.models.user import User
from app.models.employee import Employee
from app.models.salary_period import SalaryPeriod
from app.models.costs import (
    TaskCost,
    OtherCost,
    OtherCostYearly,
    SeedCost,
    PackagingCost,
    SoilProduct,
)
from app.models.revenue import Revenue

__all__ = [
    "User",
    "Employee",
    "SalaryPeriod",
    "TaskCost",
    "OtherCost",
    "OtherCostYearly",
    "SeedCost",
    "PackagingCost",
    "SoilProduct",
    "Revenue",
]
