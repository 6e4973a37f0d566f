from pydantic import BaseModel, Field, field_validator, ConfigDict, model_serializer
from decimal import Decimal
from typing import Optional, Any
from datetime import date


class SalaryPeriodBase(BaseModel):
    employee_name: str = Field(..., min_length=1, max_length=100, description="Employee name")
    yearly_amount: Decimal = Field(..., gt=0, decimal_places=2, description="Yearly salary rate")

    @field_validator('employee_name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('employee_name must not be blank')
        return v

    @field_validator('yearly_amount')
    @classmethod
    def validate_amount(cls, v):
        if v > Decimal('9999999999.99'):
            raise ValueError('yearly_amount exceeds the allowed limit')
        return v


class SalaryPeriodCreate(SalaryPeriodBase):
    """Body of POST /salary-periods: open a period on January 1 of `year`"""
    year: int = Field(..., ge=1900, le=2999, description="Year the period starts (January 1)")


class SalaryPeriodReplace(SalaryPeriodBase):
    """Body of PUT /salary-periods: close the period in `year` and open a new one"""
    year: int = Field(..., ge=1900, le=2999)
    start_date: date = Field(..., description="Date the new rate takes effect")


class SalaryPeriodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_name: str
    yearly_amount: Decimal
    start_date: date
    end_date: Optional[date] = None
    days_in_year: int

    @model_serializer
    def serialize_model(self) -> dict[str, Any]:
        """Custom serializer to convert Decimal to float for JSON"""
        return {
            'id': self.id,
            'employee_name': self.employee_name,
            'yearly_amount': float(self.yearly_amount),
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat() if self.end_date else None,
            'days_in_year': self.days_in_year,
        }


class SalaryPeriodExists(BaseModel):
    exists: bool


class AccruedTotal(BaseModel):
    """Salary accrued by all employees up to `as_of` (serialized as "date")"""
    model_config = ConfigDict(populate_by_name=True)

    as_of: date = Field(..., alias="date")
    total_paid: Decimal

    @model_serializer
    def serialize_model(self) -> dict[str, Any]:
        return {
            'date': self.as_of.isoformat(),
            'total_paid': float(self.total_paid),
        }


class LatestSalary(BaseModel):
    """Latest rate of one employee within a year"""
    model_config = ConfigDict(from_attributes=True)

    employee_name: str
    yearly_amount: Decimal
    start_date: date

    @model_serializer
    def serialize_model(self) -> dict[str, Any]:
        return {
            'employee_name': self.employee_name,
            'yearly_amount': float(self.yearly_amount),
            'start_date': self.start_date.isoformat(),
        }
