"""
PetClinic Owners — Owner Repository
====================================

What:  Storage for owners: lookup by id, save, paginated last-name search.
How:   SQLAlchemy async queries on the request's session. Writes are flushed
       (so new owners get their id immediately); the commit happens in
       `get_db_session` at the end of the request.
Who:   Created per request by the owner routes; passed to OwnerService.

Error Handling:
    SQLAlchemy errors are logged with context and re-raised as DatabaseError,
    which the global handler renders as a generic 500 page. A missing owner
    is not an error here: `find_by_id` returns None and callers decide.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.exceptions import DatabaseError
from petclinic.models.owner import Owner
from petclinic.schemas.page import Page

logger = logging.getLogger(__name__)


def _like_prefix(value: str) -> str:
    """Build a LIKE prefix pattern, escaping the wildcards in `value`."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"{escaped}%"


class OwnerRepository:
    """Owner storage bound to one database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, owner_id: int) -> Optional[Owner]:
        """
        Fetch an owner by primary key.

        Returns:
            The Owner, or None when no owner has this id.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            return await self.db.get(Owner, owner_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching owner %s: %s", owner_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the owner. Please try again.",
                context={"owner_id": owner_id},
            ) from e

    async def save(self, owner: Owner) -> Owner:
        """
        Insert a new owner or update an existing one.

        New owners (id is None) are added and flushed, which assigns their
        id. Owners carrying an id are merged into the session.

        Returns:
            The persistent Owner instance.
        """
        try:
            if owner.id is None:
                self.db.add(owner)
            else:
                owner = await self.db.merge(owner)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error saving owner %s: %s", owner.id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the owner. Please try again.",
                context={"owner_id": owner.id, "error_type": type(e).__name__},
            ) from e
        return owner

    async def find_by_last_name(self, last_name: str, page: int, size: int) -> Page:
        """
        Fetch one page of owners whose last name starts with `last_name`.

        An empty `last_name` matches every owner. Results are ordered by id
        so that pages are stable between requests.

        Args:
            last_name: Last name prefix
            page: Zero-based page number
            size: Page size

        Returns:
            Page with the owners of the requested page and the total count
            across all pages.
        """
        criteria = Owner.last_name.like(_like_prefix(last_name), escape="\\")
        try:
            count_result = await self.db.execute(
                select(func.count(Owner.id)).where(criteria)
            )
            total = count_result.scalar() or 0

            result = await self.db.execute(
                select(Owner)
                .where(criteria)
                .order_by(Owner.id)
                .offset(page * size)
                .limit(size)
            )
            owners = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error searching owners: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not search owners. Please try again.",
                context={"last_name": last_name, "page": page, "error_type": type(e).__name__},
            ) from e

        logger.debug(
            "Owner search '%s' page %d: %d of %d", last_name, page, len(owners), total
        )
        return Page(content=owners, number=page, size=size, total_elements=total)
