"""
Base CRUD class
===============
Generic create / save / delete over one SQLAlchemy model.
Persistence failures are rolled back and re-raised as StoreError.
"""
import logging
from typing import Generic, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreError
from app.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Create, Save, Delete.

        **Parameters**
        * `model`: A SQLAlchemy model class
        """
        self.model = model

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump(exclude_none=True))
        return self.save(db, db_obj)

    def save(self, db: Session, db_obj: ModelType) -> ModelType:
        """Add, commit and refresh one object"""
        try:
            db.add(db_obj)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to save {self.model.__tablename__}: {str(e)}")
            raise StoreError(f"Failed to save {self.model.__tablename__}") from e
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, id: int) -> None:
        """
        Delete by primary key.

        SQL equivalent: DELETE FROM <table> WHERE id = ?
        Deleting a missing id is not an error.
        """
        try:
            db.query(self.model).filter(self.model.id == id).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete {self.model.__tablename__} id={id}: {str(e)}")
            raise StoreError(f"Failed to delete {self.model.__tablename__}") from e
