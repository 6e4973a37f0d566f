"""
Revenue CRUD Operations
=======================
Revenue aggregations. total_revenue is stored as text with optional
thousands separators, so every sum strips commas and casts first.
"""
from decimal import Decimal
from typing import List

from sqlalchemy import Numeric, String, cast, func
from sqlalchemy.orm import Session

from app.core.accrual import to_cents
from app.models.costs import TaskCost
from app.models.revenue import Revenue

ROMAINE_VEGETABLES = ("CŒUR DE ROMAINE", "LAITUE ROMAINE")

# REPLACE(total_revenue::text, ',', '')::numeric
revenue_amount = cast(func.replace(cast(Revenue.total_revenue, String), ",", ""), Numeric(14, 2))


class CRUDRevenue:

    def get_romaine_redistribution(self, db: Session) -> List[dict]:
        """
        Split the task costs of both romaine vegetables between them
        in proportion to each one's share of their combined revenue.

        Returns [{vegetable, redistributed_cost}] rounded to cents.
        """
        revenues = (
            db.query(Revenue.vegetable, func.sum(revenue_amount).label("total_revenue"))
            .filter(Revenue.vegetable.in_(ROMAINE_VEGETABLES))
            .group_by(Revenue.vegetable)
            .order_by(Revenue.vegetable)
            .all()
        )
        total_cost = (
            db.query(func.sum(TaskCost.total_cost))
            .filter(TaskCost.vegetable.in_(ROMAINE_VEGETABLES))
            .scalar()
        )
        total_cost = Decimal(str(total_cost or 0))
        total_revenue = sum((Decimal(str(r.total_revenue or 0)) for r in revenues), Decimal("0"))

        result = []
        for row in revenues:
            if total_revenue == 0:
                share = Decimal("0")
            else:
                share = total_cost * Decimal(str(row.total_revenue or 0)) / total_revenue
            result.append({
                "vegetable": row.vegetable,
                "redistributed_cost": float(to_cents(share)),
            })
        return result

    def get_by_year(self, db: Session, *, year_from: int) -> List[dict]:
        """
        SQL equivalent:
            SELECT vegetable, SUM(REPLACE(total_revenue, ',', '')::numeric) AS total_revenue
            FROM revenues WHERE year_from >= ?
            GROUP BY vegetable ORDER BY total_revenue DESC
        """
        total = func.sum(revenue_amount).label("total_revenue")
        rows = (
            db.query(Revenue.vegetable, total)
            .filter(Revenue.year_from >= year_from)
            .group_by(Revenue.vegetable)
            .order_by(total.desc(), Revenue.vegetable)
            .all()
        )
        return [
            {"vegetable": r.vegetable, "total_revenue": float(r.total_revenue or 0)}
            for r in rows
        ]


revenue = CRUDRevenue()
