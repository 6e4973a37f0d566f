"""
Cost Models
===========
Production cost tables. Summaries over these are plain SUM / GROUP BY
queries (see app.crud.costs).
"""
from sqlalchemy import Column, DateTime, Integer, Numeric, String, func

from app.database import Base


class TaskCost(Base):
    """Labour cost of one field task"""
    __tablename__ = "task_costs"

    id = Column(Integer, primary_key=True, index=True)
    vegetable = Column(String(100), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    sub_category = Column(String(100), nullable=True)
    total_hours = Column(Numeric(10, 2), nullable=False, default=0)
    supervisor = Column(String(100), nullable=True)
    total_cost = Column(Numeric(12, 2), nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)


class OtherCost(Base):
    """Legacy per-entry other costs (used for 2024 and earlier)"""
    __tablename__ = "other_costs"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(100), nullable=False)
    cost = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class OtherCostYearly(Base):
    """Other costs recorded as yearly totals per category"""
    __tablename__ = "other_costs_new"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(100), nullable=False)
    total = Column(Numeric(12, 2), nullable=False)
    year = Column(Integer, nullable=False, index=True)


class SeedCost(Base):
    __tablename__ = "seed_costs"

    id = Column(Integer, primary_key=True, index=True)
    seed = Column(String(100), nullable=False)
    cost = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class PackagingCost(Base):
    __tablename__ = "packaging_costs"

    id = Column(Integer, primary_key=True, index=True)
    vegetable = Column(String(100), nullable=False)
    cost = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class SoilProduct(Base):
    __tablename__ = "soil_products"

    id = Column(Integer, primary_key=True, index=True)
    vegetable = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False)
    cost = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
