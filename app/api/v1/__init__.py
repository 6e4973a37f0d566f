"""
API v1 Router
"""
from fastapi import APIRouter, Depends
from app.core.deps import get_current_user
from app.api.v1 import (
    auth,
    costs,
    employees,
    revenues,
    salary_periods,
    health_check
)

api_router = APIRouter()

# Everything except health check and auth requires a bearer token
protected = [Depends(get_current_user)]

# Health check
api_router.include_router(
    health_check.router,
    tags=["Health"]
)

# Authentication
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"]
)

# Resources
api_router.include_router(
    costs.router,
    prefix="/data",
    tags=["Costs"],
    dependencies=protected
)

api_router.include_router(
    revenues.router,
    prefix="/revenues",
    tags=["Revenues"],
    dependencies=protected
)

api_router.include_router(
    employees.router,
    prefix="/employees",
    tags=["Employees"],
    dependencies=protected
)

api_router.include_router(
    salary_periods.router,
    prefix="/salary-periods",
    tags=["Salary Periods"],
    dependencies=protected
)
