"""Persistence adapters for projected entities."""

from src.infrastructure.adapters.persistence.models import Base, ProjectedEntityRow
from src.infrastructure.adapters.persistence.sqlalchemy_entity_store import (
    SqlAlchemyEntityStore,
)

__all__: list[str] = ["Base", "ProjectedEntityRow", "SqlAlchemyEntityStore"]
