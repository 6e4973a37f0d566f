"""
Salary Period Model
===================
One row = one yearly rate applied to one employee over a date range.

  end_date = NULL      -> open period, still in effect
  end_date != NULL     -> closed period (history is kept, never deleted)

days_in_year is fixed from the start year at insert time and is never
recomputed, even when the period later spans a year boundary.
"""
from sqlalchemy import CheckConstraint, Column, Date, Index, Integer, Numeric, String

from app.database import Base


class SalaryPeriod(Base):
    __tablename__ = "salary_periods"
    __table_args__ = (
        CheckConstraint("days_in_year IN (365, 366)", name="ck_salary_periods_days_in_year"),
        CheckConstraint(
            "end_date IS NULL OR end_date >= start_date",
            name="ck_salary_periods_end_after_start",
        ),
        Index("ix_salary_periods_employee_start", "employee_name", "start_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employee_name = Column(String(100), nullable=False)
    yearly_amount = Column(Numeric(12, 2), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    days_in_year = Column(Integer, nullable=False)

    def __repr__(self):
        return (
            f"<SalaryPeriod {self.employee_name} {self.yearly_amount} "
            f"{self.start_date}..{self.end_date or 'open'}>"
        )
