"""
Cost CRUD Operations
====================
Task cost inserts plus the SUM / GROUP BY summaries behind /data.

Date filters (start / end) are inclusive calendar days:
  - start and end -> created_at BETWEEN start 00:00 AND end 23:59:59.999999
  - only start    -> created_at >= start 00:00
  - only end      -> created_at <= end 23:59:59.999999
"""
import logging
from datetime import date, datetime, time
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.crud.base import CRUDBase
from app.crud.salary_period import salary_period as crud_salary_period
from app.models.costs import (
    OtherCost,
    OtherCostYearly,
    PackagingCost,
    SeedCost,
    SoilProduct,
    TaskCost,
)
from app.schemas.costs import TaskCostCreate

logger = logging.getLogger(__name__)

TASK_COST_GROUP_FIELDS = ("vegetable", "category", "sub_category", "supervisor")


def apply_date_range(query: Query, column, start: Optional[date], end: Optional[date]) -> Query:
    """Filter `query` on `column` by the optional inclusive [start, end] days."""
    if start and end:
        return query.filter(
            column.between(datetime.combine(start, time.min), datetime.combine(end, time.max))
        )
    if start:
        return query.filter(column >= datetime.combine(start, time.min))
    if end:
        return query.filter(column <= datetime.combine(end, time.max))
    return query


def _money(value) -> float:
    return float(value or 0)


class CRUDTaskCost(CRUDBase[TaskCost, TaskCostCreate]):
    """
    Task cost entries.
    delete comes from CRUDBase.
    """

    def create(self, db: Session, *, obj_in: TaskCostCreate) -> TaskCost:
        if obj_in.created_at is None:
            obj_in = obj_in.model_copy(update={"created_at": datetime.now()})
        db_obj = super().create(db, obj_in=obj_in)
        logger.info(f"Task cost created: id={db_obj.id} {db_obj.vegetable}/{db_obj.category} {db_obj.total_cost}")
        return db_obj

    def get_latest(self, db: Session, *, limit: int = 10) -> List[TaskCost]:
        """
        SQL equivalent:
            SELECT * FROM task_costs ORDER BY created_at DESC LIMIT 10
        """
        return (
            db.query(TaskCost)
            .order_by(TaskCost.created_at.desc(), TaskCost.id.desc())
            .limit(limit)
            .all()
        )

    def get_summary(
        self,
        db: Session,
        *,
        group_by: Optional[str],
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[dict]:
        """
        Hours and cost totals grouped by one task field.

        SQL equivalent (group_by = vegetable):
            SELECT vegetable, SUM(total_hours), SUM(total_cost)
            FROM task_costs [WHERE created_at ...]
            GROUP BY vegetable ORDER BY vegetable

        sub_category is grouped together with its category and ordered by
        category first.
        """
        if group_by not in TASK_COST_GROUP_FIELDS:
            raise ValidationError("Invalid or missing groupBy field")

        if group_by == "sub_category":
            keys = [TaskCost.sub_category, TaskCost.category]
            order = [TaskCost.category, TaskCost.sub_category]
        else:
            keys = [getattr(TaskCost, group_by)]
            order = keys

        query = db.query(
            *keys,
            func.sum(TaskCost.total_hours).label("total_hours"),
            func.sum(TaskCost.total_cost).label("total_cost"),
        )
        query = apply_date_range(query, TaskCost.created_at, start, end)
        rows = query.group_by(*keys).order_by(*order).all()

        result = []
        for row in rows:
            item = {key.key: getattr(row, key.key) for key in keys}
            item["total_hours"] = _money(row.total_hours)
            item["total_cost"] = _money(row.total_cost)
            result.append(item)
        return result


class CRUDCostSummary:
    """
    Read-only summaries over the other cost tables.
    Each method returns plain dicts ready for JSON.
    """

    def get_other_costs(
        self,
        db: Session,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[dict]:
        """
        Other costs of the year containing `start` (or `end`).

        Legacy years read per-entry rows from other_costs. Later years
        return the prorated salary cost ("salaire") followed by the
        yearly category totals from other_costs_new.
        """
        if not start and not end:
            raise ValidationError("Missing 'start' or 'end' query parameter.")
        year = (start or end).year

        if year <= settings.OTHER_COSTS_LEGACY_LAST_YEAR:
            query = db.query(OtherCost.category, func.sum(OtherCost.cost).label("total_cost"))
            query = apply_date_range(query, OtherCost.created_at, start, end)
            rows = query.group_by(OtherCost.category).order_by(OtherCost.category).all()
            return [{"category": r.category, "total_cost": _money(r.total_cost)} for r in rows]

        cutoff = end or date(year, 12, 31)
        salary_total = crud_salary_period.salary_cost_for_year(db, year=year, cutoff=cutoff)
        results = [{"category": "salaire", "total_cost": _money(salary_total)}]

        # SQL: SELECT category, SUM(total) FROM other_costs_new WHERE year = ? GROUP BY category
        rows = (
            db.query(OtherCostYearly.category, func.sum(OtherCostYearly.total).label("total_cost"))
            .filter(OtherCostYearly.year == year)
            .group_by(OtherCostYearly.category)
            .order_by(OtherCostYearly.category)
            .all()
        )
        results.extend({"category": r.category, "total_cost": _money(r.total_cost)} for r in rows)
        return results

    def get_seed_costs(
        self,
        db: Session,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        seed: Optional[str] = None,
    ) -> List[dict]:
        """SELECT seed, SUM(cost) FROM seed_costs [WHERE ...] GROUP BY seed ORDER BY seed"""
        if not start and not end:
            raise ValidationError("Missing 'start' or 'end' query parameter.")

        query = db.query(SeedCost.seed, func.sum(SeedCost.cost).label("total_cost"))
        query = apply_date_range(query, SeedCost.created_at, start, end)
        if seed:
            query = query.filter(SeedCost.seed == seed)
        rows = query.group_by(SeedCost.seed).order_by(SeedCost.seed).all()
        return [{"seed": r.seed, "total_cost": _money(r.total_cost)} for r in rows]

    def get_packaging_per_vegetable(
        self,
        db: Session,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[dict]:
        query = db.query(PackagingCost.vegetable, func.sum(PackagingCost.cost).label("total_cost"))
        query = apply_date_range(query, PackagingCost.created_at, start, end)
        rows = query.group_by(PackagingCost.vegetable).order_by(PackagingCost.vegetable).all()
        return [{"vegetable": r.vegetable, "total_cost": _money(r.total_cost)} for r in rows]

    def get_soil_products(
        self,
        db: Session,
        *,
        group_by: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[dict]:
        """Soil product cost grouped by `vegetable` or `category`."""
        if group_by not in ("vegetable", "category"):
            raise ValidationError(f"Invalid soil products grouping: {group_by}")
        key = getattr(SoilProduct, group_by)

        query = db.query(key, func.sum(SoilProduct.cost).label("total_cost"))
        query = apply_date_range(query, SoilProduct.created_at, start, end)
        rows = query.group_by(key).order_by(key).all()
        return [{group_by: getattr(r, group_by), "total_cost": _money(r.total_cost)} for r in rows]


task_cost = CRUDTaskCost(TaskCost)
cost_summary = CRUDCostSummary()
