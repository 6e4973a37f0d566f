"""
Cost Schemas
============
Request/response models for the /data cost endpoints.
"""
from pydantic import BaseModel, Field, ConfigDict, model_serializer
from decimal import Decimal
from typing import Optional, Any
from datetime import datetime


class TaskCostCreate(BaseModel):
    """Schema for inserting one task cost entry."""
    vegetable: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=100)
    sub_category: Optional[str] = Field(None, max_length=100)
    total_hours: Decimal = Field(..., ge=0, description="Hours worked on the task")
    supervisor: Optional[str] = Field(None, max_length=100)
    total_cost: Decimal = Field(..., ge=0, description="Labour cost of the task")
    created_at: Optional[datetime] = Field(None, description="Defaults to now")


class TaskCostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    vegetable: str
    category: str
    sub_category: Optional[str] = None
    total_hours: Decimal
    supervisor: Optional[str] = None
    total_cost: Decimal
    created_at: datetime

    @model_serializer
    def serialize_model(self) -> dict[str, Any]:
        """Custom serializer to convert Decimal to float for JSON"""
        return {
            'id': self.id,
            'vegetable': self.vegetable,
            'category': self.category,
            'sub_category': self.sub_category,
            'total_hours': float(self.total_hours),
            'supervisor': self.supervisor,
            'total_cost': float(self.total_cost),
            'created_at': self.created_at.isoformat(),
        }


class CategoryTotal(BaseModel):
    category: str
    total_cost: float
