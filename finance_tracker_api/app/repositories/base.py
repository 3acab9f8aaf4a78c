from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, Type, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy import inspect, select
from sqlalchemy import update as sa_update
from sqlalchemy.orm import Session, selectinload

ModelT = TypeVar("ModelT")

Where = Mapping[str, Any]


@dataclass(frozen=True)
class UpdateResult:
    affected: int


@dataclass(frozen=True)
class DeleteResult:
    affected: int


class Repository(Generic[ModelT]):
    """
    What it does:
    - Generic persistence gateway for a single mapped model class.

    Behavior:
    - ``where`` maps attribute names to values.  A mapping given for a
      relationship attribute filters on the related row, e.g.
      ``{"user": {"id": 1}}``.
    - ``relations`` maps relationship names to ``True`` to eager-load them.
    - ``save`` and ``update`` accept ``{"id": n}`` for a many-to-one
      relationship and write the foreign key column instead.
    - ``update``/``delete`` report affected rows and never raise on a
      missing id.
    - Nothing is committed here; commit/rollback is owned by ``get_session()``.
    """

    def __init__(self, session: Session, model: Type[ModelT]) -> None:
        self.session = session
        self.model = model
        self._mapper = inspect(model)
        pk_column = self._mapper.primary_key[0]
        self._pk = getattr(model, self._mapper.get_property_by_column(pk_column).key)

    # -- reads -----------------------------------------------------------

    def find(
        self,
        where: Optional[Where] = None,
        relations: Optional[Mapping[str, bool]] = None,
        order: Optional[Mapping[str, str]] = None,
        skip: Optional[int] = None,
        take: Optional[int] = None,
    ) -> list[ModelT]:
        stmt = self._select(where, relations)
        for key, direction in (order or {}).items():
            column = self._attribute(key)
            if direction.upper() == "DESC":
                stmt = stmt.order_by(column.desc())
            elif direction.upper() == "ASC":
                stmt = stmt.order_by(column.asc())
            else:
                raise ValueError(f"Invalid sort direction {direction!r} for {key!r}")
        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        return list(self.session.scalars(stmt).all())

    def find_by(self, where: Where) -> list[ModelT]:
        return self.find(where=where)

    def find_one(
        self,
        where: Where,
        relations: Optional[Mapping[str, bool]] = None,
    ) -> Optional[ModelT]:
        stmt = self._select(where, relations).limit(1)
        return self.session.scalars(stmt).first()

    # -- writes ----------------------------------------------------------

    def save(self, data: Mapping[str, Any]) -> ModelT:
        entity = self.model(**self._column_values(data))
        self.session.add(entity)
        self.session.flush()  # assigns identity id without committing
        self.session.refresh(entity)  # load server-side timestamps
        return entity

    def update(self, entity_id: Any, data: Mapping[str, Any]) -> UpdateResult:
        values = self._column_values(data)
        if not values:
            raise ValueError("No values to update")
        stmt = sa_update(self.model).where(self._pk == entity_id).values(**values)
        result = self.session.execute(stmt)
        return UpdateResult(affected=result.rowcount)

    def delete(self, entity_id: Any) -> DeleteResult:
        stmt = sa_delete(self.model).where(self._pk == entity_id)
        result = self.session.execute(stmt)
        return DeleteResult(affected=result.rowcount)

    # -- helpers ---------------------------------------------------------

    def _attribute(self, key: str):
        if key not in self._mapper.attrs:
            raise ValueError(f"{self.model.__name__} has no attribute {key!r}")
        return getattr(self.model, key)

    def _select(self, where: Optional[Where], relations: Optional[Mapping[str, bool]]):
        stmt = select(self.model)
        for key, value in (where or {}).items():
            attr = self._attribute(key)
            relationship = self._mapper.relationships.get(key)
            if relationship is not None and isinstance(value, Mapping):
                criterion = attr.any(**value) if relationship.uselist else attr.has(**value)
            else:
                criterion = attr == value
            stmt = stmt.where(criterion)
        for name, enabled in (relations or {}).items():
            if enabled:
                if name not in self._mapper.relationships:
                    raise ValueError(f"{self.model.__name__} has no relation {name!r}")
                stmt = stmt.options(selectinload(getattr(self.model, name)))
        return stmt

    def _column_values(self, data: Mapping[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for key, value in data.items():
            relationship = self._mapper.relationships.get(key)
            if relationship is None:
                self._attribute(key)
                values[key] = value
                continue
            if relationship.uselist:
                raise ValueError(f"Cannot assign collection {key!r} through the repository")
            for local, remote in relationship.local_remote_pairs:
                if value is None:
                    values[local.key] = None
                elif isinstance(value, Mapping):
                    values[local.key] = value[remote.key]
                else:
                    values[local.key] = getattr(value, remote.key)
        return values
