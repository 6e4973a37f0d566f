"""
Revenue API Router
==================
Endpoints:
  - GET /revenues/romaine-redistribution - romaine task costs split by revenue share
  - GET /revenues/by-year                - revenue per vegetable since a year
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.crud import revenue as crud_revenue
from app.database import get_db
from app.schemas.revenue import RedistributedCost, VegetableRevenue

router = APIRouter()


@router.get("/romaine-redistribution", response_model=List[RedistributedCost])
def get_romaine_redistribution(db: Session = Depends(get_db)):
    """
    Redistribute the combined task cost of "CŒUR DE ROMAINE" and
    "LAITUE ROMAINE" proportionally to each one's revenue.
    """
    return crud_revenue.get_romaine_redistribution(db)


@router.get("/by-year", response_model=List[VegetableRevenue])
def get_revenues_by_year(
    db: Session = Depends(get_db),
    year_from: Optional[int] = None,
):
    """
    Revenue per vegetable for seasons starting at or after `year_from`,
    highest first.
    """
    if year_from is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing 'year_from' query parameter"
        )
    return crud_revenue.get_by_year(db, year_from=year_from)
