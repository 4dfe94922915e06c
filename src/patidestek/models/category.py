"""SQLAlchemy model for listing categories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from patidestek.db.session import Base

if TYPE_CHECKING:
    from .post import Post


class Category(Base):
    """Listing type such as lost, found, adoption or help."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    # No delete cascade: removing a category nulls posts.category_id instead.
    posts: Mapped[list[Post]] = relationship("Post", back_populates="category")
