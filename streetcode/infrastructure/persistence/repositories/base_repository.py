"""Generic SQLAlchemy repository with staged writes.

Reads execute immediately. Writes are recorded on a ChangeSet shared by all
repositories of one RepositoryWrapper and only reach the database when the
wrapper's ``save_changes()`` runs, so a handler can abandon half-built work
by returning early.

Subclasses provide the entity <-> model mapping:

    class FactRepository(SqlAlchemyRepository[Fact, FactModel]):
        model = FactModel
        order_by = (FactModel.number,)

        def _to_domain(self, model: FactModel) -> Fact: ...
        def _to_values(self, entity: Fact) -> dict[str, Any]: ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, cast

from sqlalchemy import ColumnElement, Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from streetcode.infrastructure.persistence.base import Base

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", bound=Base)


class ChangeKind(str, Enum):
    """Kind of staged write."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class StagedChange:
    """One pending write and the repository that knows how to apply it."""

    kind: ChangeKind
    repository: "SqlAlchemyRepository[Any, Any]"
    entity: Any

    async def apply(self) -> int:
        """Execute the write. Returns affected rows."""
        if self.kind is ChangeKind.CREATE:
            return await self.repository._apply_create(self.entity)
        if self.kind is ChangeKind.UPDATE:
            return await self.repository._apply_update(self.entity)
        return await self.repository._apply_delete(self.entity)


class ChangeSet:
    """Ordered list of staged writes for one unit of work."""

    def __init__(self) -> None:
        self._changes: list[StagedChange] = []

    def stage(self, change: StagedChange) -> None:
        self._changes.append(change)

    def drain(self) -> list[StagedChange]:
        """Return all staged writes and empty the set."""
        changes, self._changes = self._changes, []
        return changes

    def clear(self) -> None:
        self._changes.clear()

    def __len__(self) -> int:
        return len(self._changes)


class SqlAlchemyRepository(Generic[EntityT, ModelT]):
    """Base implementation of the generic Repository protocol.

    Attributes:
        model: Mapped model class (set by subclasses).
        order_by: Default ordering for ``get_all``.
        session: SQLAlchemy async session.
    """

    model: ClassVar[type[Any]]
    order_by: ClassVar[tuple[Any, ...]] = ()

    def __init__(self, session: AsyncSession, changes: ChangeSet | None = None) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session.
            changes: Change set shared with sibling repositories. A private
                one is created when omitted.
        """
        self.session = session
        self._changes = changes if changes is not None else ChangeSet()

    # =========================================================================
    # Reads
    # =========================================================================

    async def get_first_or_default(self, **criteria: Any) -> EntityT | None:
        """Return the first entity matching all criteria, or None."""
        stmt = self._select().where(*self._where(criteria)).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._to_domain(model)

    async def get_all(self, **criteria: Any) -> list[EntityT]:
        """Return every entity matching all criteria."""
        stmt = self._select().where(*self._where(criteria))
        if self.order_by:
            stmt = stmt.order_by(*self.order_by)
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def count(self, **criteria: Any) -> int:
        """Return the number of rows matching all criteria."""
        stmt = select(func.count()).select_from(self.model).where(*self._where(criteria))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    # =========================================================================
    # Staged writes
    # =========================================================================

    def create(self, entity: EntityT) -> None:
        self._changes.stage(StagedChange(ChangeKind.CREATE, self, entity))

    def update(self, entity: EntityT) -> None:
        self._changes.stage(StagedChange(ChangeKind.UPDATE, self, entity))

    def delete(self, entity: EntityT) -> None:
        self._changes.stage(StagedChange(ChangeKind.DELETE, self, entity))

    async def _apply_create(self, entity: EntityT) -> int:
        model = self.model(**self._to_values(entity))
        self.session.add(model)
        await self.session.flush()
        self._after_create(entity, model)
        return 1

    async def _apply_update(self, entity: EntityT) -> int:
        stmt = (
            update(self.model)
            .where(*self._identity(entity))
            .values(**self._to_values(entity))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return cast(Any, result).rowcount or 0

    async def _apply_delete(self, entity: EntityT) -> int:
        stmt = (
            delete(self.model)
            .where(*self._identity(entity))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return cast(Any, result).rowcount or 0

    # =========================================================================
    # Hooks for subclasses
    # =========================================================================

    def _select(self) -> Select[Any]:
        return select(self.model)

    def _where(self, criteria: dict[str, Any]) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        for name, value in criteria.items():
            column = getattr(self.model, name, None)
            if column is None:
                raise ValueError(
                    f"{self.model.__name__} has no attribute '{name}' to filter on"
                )
            clauses.append(column == value)
        return clauses

    def _identity(self, entity: EntityT) -> list[ColumnElement[bool]]:
        return [self.model.id == cast(Any, entity).id]

    def _after_create(self, entity: EntityT, model: ModelT) -> None:
        cast(Any, entity).id = cast(Any, model).id

    def _to_domain(self, model: ModelT) -> EntityT:
        raise NotImplementedError

    def _to_values(self, entity: EntityT) -> dict[str, Any]:
        raise NotImplementedError
