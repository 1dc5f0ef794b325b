"""SQLAlchemy entity store adapter.

Persists projected entities as JSON payloads in a single
``projected_entities`` table keyed by (entity_type, entity_id).

Store Contract:
- put is an upsert committed immediately, so the next get sees it
- Driver errors are translated to EntityStoreError subclasses
- Payloads are decoded with the model registered for the entity type
"""

from __future__ import annotations

from sqlalchemy import Engine, select
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from src.application.ports.entity_store import EntityStoreProtocol
from src.domain.errors.entity_store import (
    EntityStoreConnectionError,
    EntityStoreError,
    UnknownEntityTypeError,
)
from src.domain.models import ENTITY_TYPES, Entity
from src.infrastructure.adapters.persistence.models import Base, ProjectedEntityRow
from src.infrastructure.observability import get_logger_for_component


class SqlAlchemyEntityStore(EntityStoreProtocol):
    """Relational implementation of EntityStoreProtocol.

    Attributes:
        _session_factory: Session factory bound to the projection database.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """Initialize the store.

        Args:
            session_factory: Factory producing sessions for the database.
        """
        self._session_factory = session_factory
        self._log = get_logger_for_component(
            self.__class__.__name__, component="persistence"
        )

    @staticmethod
    def create_schema(engine: Engine) -> None:
        """Create the projected_entities table if it does not exist."""
        Base.metadata.create_all(engine)

    def get(self, entity_type: str, entity_id: str) -> Entity | None:
        model = ENTITY_TYPES.get(entity_type)
        if model is None:
            raise UnknownEntityTypeError(entity_type)

        try:
            with self._session_factory() as session:
                payload = session.scalar(
                    select(ProjectedEntityRow.payload).where(
                        ProjectedEntityRow.entity_type == entity_type,
                        ProjectedEntityRow.entity_id == entity_id,
                    )
                )
        except SQLAlchemyError as exc:
            raise self._translate(exc, "read", entity_type, entity_id) from exc

        if payload is None:
            return None
        entity: Entity = model.from_dict(payload)
        return entity

    def put(self, entity_type: str, entity_id: str, entity: Entity) -> None:
        if entity_type not in ENTITY_TYPES:
            raise UnknownEntityTypeError(entity_type)

        row = ProjectedEntityRow(
            entity_type=entity_type,
            entity_id=entity_id,
            payload=entity.to_dict(),
        )
        try:
            with self._session_factory.begin() as session:
                session.merge(row)
        except SQLAlchemyError as exc:
            raise self._translate(exc, "write", entity_type, entity_id) from exc

    def _translate(
        self,
        exc: SQLAlchemyError,
        action: str,
        entity_type: str,
        entity_id: str,
    ) -> EntityStoreError:
        self._log.error(
            "entity_store_failed",
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            error=str(exc),
        )
        error_class = (
            EntityStoreConnectionError
            if isinstance(exc, OperationalError)
            else EntityStoreError
        )
        return error_class(
            f"Failed to {action} {entity_type} {entity_id}: {exc}",
            entity_type=entity_type,
            entity_id=entity_id,
        )
