"""Owner-scoped repository shared by all user resources."""

import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class OwnedRepository(Generic[ModelType]):
    """
    CRUD over one table, restricted to the rows of a single owner.

    Every query is filtered by user_id, so a row owned by someone else looks
    exactly like a row that does not exist.
    """

    model: Type[ModelType]
    resource_name: str = "Record"
    conflict_message: str = "Record already exists"

    def __init__(self, session: AsyncSession, owner_id: int):
        """Initialize repository with database session and owning user."""
        self.session = session
        self.owner_id = owner_id

    def _owned(self):
        return select(self.model).where(self.model.user_id == self.owner_id)

    async def find(
        self,
        filters: Sequence[Any] = (),
        skip: int = 0,
        limit: Optional[int] = 100,
        order_by: Sequence[Any] = (),
    ) -> List[ModelType]:
        """Get owned rows matching SQLAlchemy filter expressions."""
        query = self._owned()
        for condition in filters:
            query = query.where(condition)
        query = query.order_by(*(order_by or (self.model.id,)))
        query = query.offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_one(self, record_id: int) -> Optional[ModelType]:
        result = await self.session.execute(
            self._owned().where(self.model.id == record_id)
        )
        return result.scalar_one_or_none()

    async def get(self, record_id: int) -> ModelType:
        """Get owned row by ID or raise NotFoundError."""
        record = await self.find_one(record_id)
        if record is None:
            raise NotFoundError(f"{self.resource_name} not found")
        return record

    async def insert(self, values: Mapping[str, Any]) -> ModelType:
        """Create a new row owned by the current user."""
        record = self.model(**dict(values), user_id=self.owner_id)
        self.session.add(record)
        await self._commit()
        await self.session.refresh(record)
        logger.info("Created %s id=%s user=%s", self.resource_name, record.id, self.owner_id)
        return record

    async def update(self, record_id: int, values: Mapping[str, Any]) -> ModelType:
        """Overwrite the given columns of an owned row."""
        record = await self.get(record_id)
        for name, value in values.items():
            setattr(record, name, value)
        await self._commit()
        await self.session.refresh(record)
        logger.info(
            "Updated %s id=%s user=%s fields=%s",
            self.resource_name, record_id, self.owner_id, sorted(values),
        )
        return record

    async def delete(self, record_id: int) -> None:
        """Delete an owned row."""
        record = await self.get(record_id)
        await self.session.delete(record)
        await self._commit()
        logger.info("Deleted %s id=%s user=%s", self.resource_name, record_id, self.owner_id)

    def to_dict(self, record: ModelType, fields: Sequence[str]) -> Dict[str, Any]:
        """Snapshot the writable columns of a row."""
        return {name: getattr(record, name) for name in fields}

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info("Integrity error on %s: %s", self.resource_name, exc.orig)
            raise ConflictError(self.conflict_message) from exc
