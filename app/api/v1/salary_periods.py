"""
Salary Period API Router
========================
Endpoints:
  - POST /salary-periods          - open a period on January 1 of a year
  - PUT  /salary-periods          - close the year's period and open a new one
  - GET  /salary-periods/exists   - is there a period starting January 1?
  - GET  /salary-periods/accrued  - total salary accrued as of a date
  - GET  /salary-periods/latest   - latest rate per employee within a year
  - GET  /salary-periods/employee/{employee_name} - one employee's history
"""
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.crud import salary_period as crud_salary_period
from app.database import get_db
from app.schemas.salary_period import (
    AccruedTotal,
    LatestSalary,
    SalaryPeriodCreate,
    SalaryPeriodExists,
    SalaryPeriodReplace,
    SalaryPeriodResponse,
)

router = APIRouter()


@router.post("/", response_model=SalaryPeriodResponse, status_code=status.HTTP_201_CREATED)
def create_salary_period(
    *,
    db: Session = Depends(get_db),
    period_in: SalaryPeriodCreate,
):
    """
    Create a salary period starting January 1 of `year`.

    Request Body:
      {"employee_name": "Alice", "yearly_amount": 42000, "year": 2025}

    days_in_year is 366 for leap years, 365 otherwise.
    No duplicate check: posting twice creates two periods.
    """
    period = crud_salary_period.create_for_year(
        db,
        employee_name=period_in.employee_name,
        yearly_amount=period_in.yearly_amount,
        year=period_in.year,
    )
    return SalaryPeriodResponse.model_validate(period)


@router.put("/", response_model=SalaryPeriodResponse, status_code=status.HTTP_201_CREATED)
def replace_salary_period(
    *,
    db: Session = Depends(get_db),
    period_in: SalaryPeriodReplace,
):
    """
    Set a new rate from `start_date` (close old, create new).

    Request Body:
      {"employee_name": "Alice", "year": 2025, "start_date": "2025-07-01", "yearly_amount": 48000}

    The employee's latest period starting in `year` is closed the day
    before `start_date`; the new period is open-ended.
    """
    period = crud_salary_period.replace_for_year(
        db,
        employee_name=period_in.employee_name,
        year=period_in.year,
        start_date=period_in.start_date,
        yearly_amount=period_in.yearly_amount,
    )
    return SalaryPeriodResponse.model_validate(period)


@router.get("/exists", response_model=SalaryPeriodExists)
def salary_period_exists(
    *,
    db: Session = Depends(get_db),
    employee_name: str = Query(..., min_length=1),
    year: int = Query(..., ge=1900, le=2999),
):
    """
    Check whether the employee has a period starting exactly on January 1 of `year`.
    """
    exists = crud_salary_period.exists_for_year(db, employee_name=employee_name, year=year)
    return SalaryPeriodExists(exists=exists)


@router.get("/accrued", response_model=AccruedTotal)
def get_accrued_total(
    *,
    db: Session = Depends(get_db),
    as_of: date = Query(..., alias="date", description="YYYY-MM-DD"),
):
    """
    Total salary accrued by all employees up to and including `date`.

    Each period accrues yearly_amount / days_in_year per day until its
    end_date, the next period's start, or `date`, whichever comes first.
    """
    total = crud_salary_period.total_accrued_as_of(db, as_of=as_of)
    return AccruedTotal(as_of=as_of, total_paid=total)


@router.get("/latest", response_model=List[LatestSalary])
def get_latest_salaries(
    *,
    db: Session = Depends(get_db),
    year: int = Query(..., ge=1900, le=2999),
):
    """
    Latest salary of each employee among the periods starting in `year`.
    Employees without a period in that year are omitted.
    """
    rows = crud_salary_period.latest_per_employee(db, year=year)
    return [LatestSalary.model_validate(row) for row in rows]


@router.get("/employee/{employee_name}", response_model=List[SalaryPeriodResponse])
def get_employee_salary_periods(
    *,
    db: Session = Depends(get_db),
    employee_name: str,
):
    """Get all salary periods of one employee, oldest first"""
    periods = crud_salary_period.get_by_employee(db, employee_name=employee_name)
    return [SalaryPeriodResponse.model_validate(p) for p in periods]
