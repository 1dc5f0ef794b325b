"""SQLAlchemy ORM models for the projected entity table."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for projection tables."""


class ProjectedEntityRow(Base):
    """One projected entity, serialized with its model's to_dict()."""

    __tablename__ = "projected_entities"

    entity_type: Mapped[str] = mapped_column(String(32), primary_key=True)
    entity_id: Mapped[str] = mapped_column(String(160), primary_key=True)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<ProjectedEntityRow {self.entity_type}:{self.entity_id}>"
