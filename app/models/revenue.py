from sqlalchemy import Column, Integer, String

from app.database import Base


class Revenue(Base):
    """
    Revenue per vegetable and season.

    total_revenue is stored as imported text and may contain thousands
    separators ("12,345.67"); queries strip the commas before casting.
    """
    __tablename__ = "revenues"

    id = Column(Integer, primary_key=True, index=True)
    vegetable = Column(String(100), nullable=False, index=True)
    total_revenue = Column(String(50), nullable=False)
    year_from = Column(Integer, nullable=False)
