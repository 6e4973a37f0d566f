from pydantic import BaseModel


class RedistributedCost(BaseModel):
    """Share of the romaine task costs carried by one vegetable"""
    vegetable: str
    redistributed_cost: float


class VegetableRevenue(BaseModel):
    vegetable: str
    total_revenue: float
