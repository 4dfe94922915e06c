"""Shared CRUD for the simple named entities: categories and tags."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from patidestek.core.errors import ConflictError, NotFoundError
from patidestek.db.integrity import commit_or_conflict
from patidestek.models import Category, Tag

ModelT = TypeVar("ModelT", Category, Tag)


class NamedEntityService(Generic[ModelT]):
    """CRUD over a model with an integer ``id`` and a unique ``name``."""

    def __init__(self, model: type[ModelT], label: str) -> None:
        self.model = model
        self.label = label

    @property
    def _duplicate_message(self) -> str:
        return f"{self.label} with this name already exists"

    def list_all(self, db: Session) -> Sequence[ModelT]:
        """Return every record ordered by id."""
        return db.scalars(select(self.model).order_by(self.model.id.asc())).all()

    def get(self, db: Session, entity_id: int) -> ModelT:
        entity = db.get(self.model, entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found")
        return entity

    def _find_by_name(self, db: Session, name: str) -> ModelT | None:
        return db.scalars(select(self.model).where(self.model.name == name)).first()

    def create(self, db: Session, name: str) -> ModelT:
        """Insert a record; names are unique and compared case-sensitively."""
        if self._find_by_name(db, name) is not None:
            raise ConflictError(self._duplicate_message)
        entity = self.model(name=name)
        db.add(entity)
        commit_or_conflict(db, self._duplicate_message)
        db.refresh(entity)
        return entity

    def update(self, db: Session, entity_id: int, name: str) -> ModelT:
        """Rename a record; renaming to its current name is a no-op success."""
        entity = self.get(db, entity_id)
        existing = self._find_by_name(db, name)
        if existing is not None and existing.id != entity.id:
            raise ConflictError(self._duplicate_message)
        entity.name = name
        commit_or_conflict(db, self._duplicate_message)
        db.refresh(entity)
        return entity

    def delete(self, db: Session, entity_id: int) -> None:
        """Delete a record.

        Referencing posts lose their category (set null) or the tag link; they
        are never deleted.
        """
        entity = self.get(db, entity_id)
        db.delete(entity)
        db.commit()


category_service: NamedEntityService[Category] = NamedEntityService(Category, "Category")
tag_service: NamedEntityService[Tag] = NamedEntityService(Tag, "Tag")
