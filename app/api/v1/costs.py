"""
Cost API Router
===============
Task cost entry and the cost summaries used by the dashboard.

Endpoints (mounted under /data):
  - POST   /costs                          - insert a task cost
  - GET    /costs/summary                  - task hours/cost grouped by a field
  - GET    /costs/latest                   - 10 most recent task costs
  - DELETE /costs/{cost_id}                - delete a task cost
  - GET    /costs/other_costs              - yearly other costs incl. salaries
  - GET    /costs/seed_costs               - seed cost per seed
  - GET    /packaging_costs/per_vegetable  - packaging cost per vegetable
  - GET    /costs/soil_products/vegetable  - soil product cost per vegetable
  - GET    /costs/soil_products/category   - soil product cost per category
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.crud import cost_summary as crud_cost_summary
from app.crud import task_cost as crud_task_cost
from app.database import get_db
from app.schemas.costs import CategoryTotal, TaskCostCreate, TaskCostResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/costs", response_model=TaskCostResponse, status_code=status.HTTP_201_CREATED)
def create_task_cost(
    cost_in: TaskCostCreate,
    db: Session = Depends(get_db),
):
    """
    Insert a new task cost entry.

    Request Body:
      {
        "vegetable": "CAROTTE",
        "category": "Récolte",
        "sub_category": "Arrachage",
        "total_hours": 12.5,
        "supervisor": "Marie",
        "total_cost": 250.00,
        "created_at": "2025-06-01T08:00:00"   (optional, defaults to now)
      }
    """
    cost = crud_task_cost.create(db, obj_in=cost_in)
    return TaskCostResponse.model_validate(cost)


@router.get("/costs/summary")
def get_costs_summary(
    db: Session = Depends(get_db),
    group_by: Optional[str] = Query(None, alias="groupBy"),
    start: Optional[date] = None,
    end: Optional[date] = None,
):
    """
    Task hours and cost totals.

    Query Parameters:
      groupBy: vegetable | category | sub_category | supervisor
      start, end: optional inclusive date range on created_at
    """
    return crud_task_cost.get_summary(db, group_by=group_by, start=start, end=end)


@router.get("/costs/other_costs", response_model=List[CategoryTotal])
def get_other_costs(
    db: Session = Depends(get_db),
    start: Optional[date] = None,
    end: Optional[date] = None,
):
    """
    Other costs of the year containing `start` (or `end` when start is absent).

    From 2025 on the first row is the prorated salary cost ("salaire")
    accrued through `end`, followed by the yearly category totals.
    """
    return crud_cost_summary.get_other_costs(db, start=start, end=end)


@router.get("/costs/latest", response_model=List[TaskCostResponse])
def get_latest_costs(db: Session = Depends(get_db)):
    """Get the 10 most recent task costs"""
    costs = crud_task_cost.get_latest(db, limit=10)
    return [TaskCostResponse.model_validate(c) for c in costs]


@router.delete("/costs/{cost_id}")
def delete_task_cost(
    cost_id: int,
    db: Session = Depends(get_db),
):
    """Delete a task cost entry"""
    logger.info(f"Deleting task cost: ID={cost_id}")
    crud_task_cost.delete(db, id=cost_id)
    return {"success": True}


@router.get("/costs/seed_costs")
def get_seed_costs(
    db: Session = Depends(get_db),
    start: Optional[date] = None,
    end: Optional[date] = None,
    seed: Optional[str] = None,
):
    """
    Seed cost per seed, e.g. [{"seed": "carrot", "total_cost": 2530.45}]

    At least one of start / end is required.
    """
    return crud_cost_summary.get_seed_costs(db, start=start, end=end, seed=seed)


@router.get("/packaging_costs/per_vegetable")
def get_packaging_costs_per_vegetable(
    db: Session = Depends(get_db),
    start: Optional[date] = None,
    end: Optional[date] = None,
):
    """Packaging cost per vegetable, e.g. [{"vegetable": "CHOU", "total_cost": 1234}]"""
    return crud_cost_summary.get_packaging_per_vegetable(db, start=start, end=end)


@router.get("/costs/soil_products/vegetable")
def get_soil_products_by_vegetable(
    db: Session = Depends(get_db),
    start: Optional[date] = None,
    end: Optional[date] = None,
):
    return crud_cost_summary.get_soil_products(db, group_by="vegetable", start=start, end=end)


@router.get("/costs/soil_products/category")
def get_soil_products_by_category(
    db: Session = Depends(get_db),
    start: Optional[date] = None,
    end: Optional[date] = None,
):
    return crud_cost_summary.get_soil_products(db, group_by="category", start=start, end=end)
