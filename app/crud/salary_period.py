"""
Salary Period CRUD Operations
=============================
Creation and supersession of salary periods plus the accrual queries.

Periods are never deleted: a rate change closes the previous period by
setting its end_date to the day before the new period starts.

Every method takes the request's Session as first argument, so tests can
hand in any session (SQLite in-memory, mocks).
"""
import logging
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from sqlalchemy import Date, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core import accrual
from app.core.exceptions import StoreError, ValidationError
from app.crud.base import CRUDBase
from app.models.salary_period import SalaryPeriod
from app.schemas.salary_period import SalaryPeriodCreate

logger = logging.getLogger(__name__)


def _year_bounds(year: int):
    return date(year, 1, 1), date(year, 12, 31)


def _validate_common(employee_name, yearly_amount, year) -> Decimal:
    if not isinstance(employee_name, str) or not employee_name.strip():
        raise ValidationError("Missing required fields.")
    if isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= 9999:
        raise ValidationError("Invalid year.")
    try:
        amount = Decimal(str(yearly_amount))
    except (InvalidOperation, TypeError):
        raise ValidationError("Invalid yearly_amount.")
    if not amount.is_finite() or amount <= 0:
        raise ValidationError("yearly_amount must be greater than 0.")
    try:
        whole_cents = amount == amount.quantize(accrual.CENT)
    except InvalidOperation:
        whole_cents = False
    if not whole_cents:
        raise ValidationError("yearly_amount must have at most 2 decimal places.")
    return amount


def employee_lock(employee_name: str):
    """
    Transaction-scoped advisory lock keyed on the employee name.

    SQL equivalent: SELECT pg_advisory_xact_lock(hashtext(?))
    """
    return select(func.pg_advisory_xact_lock(func.hashtext(employee_name)))


def lock_employee(db: Session, employee_name: str) -> None:
    """
    Serialize salary writers of one employee until commit or rollback.

    PostgreSQL only; SQLite already serializes writers on the database file.
    """
    if db.get_bind().dialect.name == "postgresql":
        db.execute(employee_lock(employee_name))


class CRUDSalaryPeriod(CRUDBase[SalaryPeriod, SalaryPeriodCreate]):
    """
    Salary period store operations.

    Invariant kept by replace_for_year: at most one period per employee
    and year is left open after a replacement.
    """

    def create_for_year(
        self,
        db: Session,
        *,
        employee_name: str,
        yearly_amount,
        year: int,
    ) -> SalaryPeriod:
        """
        Insert an open period starting January 1 of `year`.

        Does not check for an existing period for the same employee/year,
        so repeated calls create duplicates.
        """
        amount = _validate_common(employee_name, yearly_amount, year)
        db_obj = SalaryPeriod(
            employee_name=employee_name.strip(),
            yearly_amount=amount,
            start_date=date(year, 1, 1),
            end_date=None,
            days_in_year=accrual.days_in_year(year),
        )
        db_obj = self.save(db, db_obj)
        logger.info(f"Salary period created: {db_obj.employee_name} {amount} from {db_obj.start_date}")
        return db_obj

    def get_latest_in_year(
        self,
        db: Session,
        *,
        employee_name: str,
        year: int,
        for_update: bool = False,
    ) -> Optional[SalaryPeriod]:
        """
        Latest period of an employee starting within `year`.

        SQL equivalent:
            SELECT * FROM salary_periods
            WHERE employee_name = ? AND start_date BETWEEN 'YYYY-01-01' AND 'YYYY-12-31'
            ORDER BY start_date DESC, id DESC
            LIMIT 1 [FOR UPDATE]
        """
        first_day, last_day = _year_bounds(year)
        query = (
            db.query(SalaryPeriod)
            .filter(
                SalaryPeriod.employee_name == employee_name,
                SalaryPeriod.start_date >= first_day,
                SalaryPeriod.start_date <= last_day,
            )
            .order_by(SalaryPeriod.start_date.desc(), SalaryPeriod.id.desc())
        )
        if for_update:
            query = query.with_for_update()
        return query.first()

    def replace_for_year(
        self,
        db: Session,
        *,
        employee_name: str,
        year: int,
        start_date: date,
        yearly_amount,
    ) -> SalaryPeriod:
        """
        Close the employee's period in `year` (if any) and open a new one.

        The existing period gets end_date = start_date - 1 day. Close and
        insert are committed together; any failure rolls both back.
        Concurrent replaces for the same employee wait on lock_employee,
        so each one reads the period left open by the previous commit.
        """
        amount = _validate_common(employee_name, yearly_amount, year)
        if not isinstance(start_date, date):
            raise ValidationError("Missing required fields.")
        if start_date.year != year:
            raise ValidationError(f"start_date {start_date} is not in year {year}.")

        employee_name = employee_name.strip()
        try:
            lock_employee(db, employee_name)
            existing = self.get_latest_in_year(
                db, employee_name=employee_name, year=year, for_update=True
            )
            if existing:
                close_on = start_date - timedelta(days=1)
                if close_on < existing.start_date:
                    db.rollback()
                    logger.warning(
                        f"Replace rejected for {employee_name}: new start {start_date} "
                        f"does not follow existing start {existing.start_date}"
                    )
                    raise ValidationError(
                        f"start_date must be after the existing period start ({existing.start_date})."
                    )
                existing.end_date = close_on

            db_obj = SalaryPeriod(
                employee_name=employee_name,
                yearly_amount=amount,
                start_date=start_date,
                end_date=None,
                days_in_year=accrual.days_in_year(year),
            )
            db.add(db_obj)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to replace salary period for {employee_name}: {str(e)}")
            raise StoreError("Failed to replace salary period") from e

        db.refresh(db_obj)
        if existing:
            logger.info(f"Salary period closed: {employee_name} id={existing.id} end={existing.end_date}")
        logger.info(f"Salary period opened: {employee_name} {amount} from {start_date}")
        return db_obj

    def exists_for_year(self, db: Session, *, employee_name: str, year: int) -> bool:
        """
        True when a period starts exactly on January 1 of `year`.

        Mid-year periods are not matched here, unlike replace_for_year.
        """
        found = (
            db.query(SalaryPeriod.id)
            .filter(
                SalaryPeriod.employee_name == employee_name,
                SalaryPeriod.start_date == date(year, 1, 1),
            )
            .first()
        )
        return found is not None

    def _with_next_start(self, db: Session):
        """
        All periods with the start date of the employee's following period.

        SQL equivalent:
            SELECT *, LEAD(start_date) OVER (
                PARTITION BY employee_name ORDER BY start_date, id
            ) AS next_start
            FROM salary_periods
        """
        next_start = func.lead(SalaryPeriod.start_date, type_=Date).over(
            partition_by=SalaryPeriod.employee_name,
            order_by=(SalaryPeriod.start_date, SalaryPeriod.id),
        )
        return db.query(
            SalaryPeriod.id,
            SalaryPeriod.employee_name,
            SalaryPeriod.yearly_amount,
            SalaryPeriod.start_date,
            SalaryPeriod.end_date,
            SalaryPeriod.days_in_year,
            next_start.label("next_start"),
        ).subquery()

    def total_accrued_as_of(self, db: Session, *, as_of: date) -> Decimal:
        """
        Salary accrued by all employees from their first period through `as_of`.

        Each period accrues from its start_date to the earliest of its own
        end_date, the day before the next period starts, and `as_of`.
        Periods starting after `as_of` are excluded.
        """
        periods = self._with_next_start(db)
        rows = (
            db.query(periods)
            .filter(periods.c.start_date <= as_of)
            .order_by(periods.c.employee_name, periods.c.start_date, periods.c.id)
            .all()
        )

        total = Decimal("0")
        for row in rows:
            total += accrual.prorate(
                row.yearly_amount,
                row.days_in_year,
                row.start_date,
                accrual.effective_end(row.end_date, row.next_start),
                None,
                as_of,
            )
        return accrual.to_cents(total)

    def salary_cost_for_year(self, db: Session, *, year: int, cutoff: date) -> Decimal:
        """
        Salary cost of periods starting in `year`, accrued through `cutoff`.

        Each period runs from its start_date to the earlier of its own
        end_date and `cutoff`, clipped to January 1 .. December 31 of `year`.
        Successors are not consulted, so duplicate open periods each count.
        """
        first_day, last_day = _year_bounds(year)
        rows = (
            db.query(SalaryPeriod)
            .filter(SalaryPeriod.start_date >= first_day, SalaryPeriod.start_date <= last_day)
            .all()
        )

        window_end = min(cutoff, last_day)
        total = Decimal("0")
        for row in rows:
            total += accrual.prorate(
                row.yearly_amount,
                row.days_in_year,
                row.start_date,
                row.end_date,
                first_day,
                window_end,
            )
        return accrual.to_cents(total)

    def latest_per_employee(self, db: Session, *, year: int) -> List:
        """
        Most recent period of each employee starting in `year`.

        SQL equivalent:
            SELECT employee_name, yearly_amount, start_date FROM (
                SELECT *, ROW_NUMBER() OVER (
                    PARTITION BY employee_name ORDER BY start_date DESC, id DESC
                ) AS rn
                FROM salary_periods
                WHERE start_date BETWEEN 'YYYY-01-01' AND 'YYYY-12-31'
            ) WHERE rn = 1
            ORDER BY employee_name
        """
        first_day, last_day = _year_bounds(year)
        rn = func.row_number().over(
            partition_by=SalaryPeriod.employee_name,
            order_by=(SalaryPeriod.start_date.desc(), SalaryPeriod.id.desc()),
        )
        ranked = (
            db.query(
                SalaryPeriod.employee_name,
                SalaryPeriod.yearly_amount,
                SalaryPeriod.start_date,
                rn.label("rn"),
            )
            .filter(SalaryPeriod.start_date >= first_day, SalaryPeriod.start_date <= last_day)
            .subquery()
        )
        return (
            db.query(ranked.c.employee_name, ranked.c.yearly_amount, ranked.c.start_date)
            .filter(ranked.c.rn == 1)
            .order_by(ranked.c.employee_name)
            .all()
        )

    def get_by_employee(self, db: Session, *, employee_name: str) -> List[SalaryPeriod]:
        """Full history of one employee, oldest first"""
        return (
            db.query(SalaryPeriod)
            .filter(SalaryPeriod.employee_name == employee_name)
            .order_by(SalaryPeriod.start_date, SalaryPeriod.id)
            .all()
        )


salary_period = CRUDSalaryPeriod(SalaryPeriod)
