"""
Faithtrack Backend: Access Checks Shared by All Services
==========================================================

What:  The two guards every mutating operation starts with.
How:   require_caller() turns an absent caller into UnauthenticatedError;
       get_owned() performs the single point read and compares owners.

Both missing and foreign records raise NotFoundOrForbiddenError, so a caller
probing someone else's ids learns nothing about which ids exist.
"""

import uuid
from typing import Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.database import Base
from faithtrack.exceptions import NotFoundOrForbiddenError, UnauthenticatedError

ModelT = TypeVar("ModelT", bound=Base)


def require_caller(caller_id: Optional[str]) -> str:
    """Return the caller id, or raise UnauthenticatedError for anonymous callers."""
    if not caller_id:
        raise UnauthenticatedError()
    return caller_id


async def get_owned(
    db: AsyncSession,
    model: Type[ModelT],
    record_id: uuid.UUID,
    caller_id: str,
    resource: str,
) -> ModelT:
    """
    Fetch a record by primary key and confirm the caller owns it.

    Raises:
        NotFoundOrForbiddenError: record is missing or has a different owner
    """
    record = await db.get(model, record_id)
    if record is None or record.user_id != caller_id:
        raise NotFoundOrForbiddenError(resource=resource, resource_id=str(record_id))
    return record
