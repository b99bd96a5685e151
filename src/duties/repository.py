"""Persistence helpers for the duty table.

Each helper runs one parameterized statement in its own session and returns a
``Result``. Exceptions raised below this layer are logged and converted into
``InternalError`` values here; they never propagate to the resolvers.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, exists as sql_exists, insert, select, update

from .database.connection import get_async_session
from .dbmodels import Duties
from .errors import InternalError
from .graphql.types.duty import Duty
from .logging import get_logger
from .result import Err, Ok, Result

logger = get_logger(__name__)


def _to_duty(row: Any) -> Duty:
    return Duty(id=row.id, name=row.name)


def _internal_error(operation: str, exc: Exception, **context: Any) -> Err:
    logger.exception("Duty repository operation failed", operation=operation, **context)
    return Err(InternalError.from_exception(exc))


async def exists(*, id: str | None = None, name: str | None = None) -> Result[bool]:
    """Check whether a duty matches the given id or name.

    Exactly one criterion must be given.
    """
    if (id is None) == (name is None):
        raise ValueError("exists() requires exactly one of 'id' or 'name'")

    criterion = Duties.id == id if id is not None else Duties.name == name
    try:
        async with get_async_session() as session:
            result = await session.execute(select(sql_exists().where(criterion)))
            return Ok(bool(result.scalar()))
    except Exception as e:
        return _internal_error("exists", e, duty_id=id, name=name)


async def list_duties() -> Result[list[Duty]]:
    """Fetch every duty. Order is whatever the database returns."""
    try:
        async with get_async_session() as session:
            result = await session.execute(select(Duties.id, Duties.name))
            return Ok([_to_duty(row) for row in result.all()])
    except Exception as e:
        return _internal_error("list", e)


async def insert_duty(id: str, name: str) -> Result[Duty]:
    stmt = insert(Duties).values(id=id, name=name).returning(Duties.id, Duties.name)
    try:
        async with get_async_session() as session:
            result = await session.execute(stmt)
            duty = _to_duty(result.one())
    except Exception as e:
        return _internal_error("insert", e, duty_id=id, name=name)

    logger.info("Created new duty", duty_id=duty.id, name=duty.name)
    return Ok(duty)


async def update_duty(id: str, name: str) -> Result[Duty]:
    """Rename a duty and return the updated row.

    Callers are expected to have checked that the id exists; a missing row is
    reported as an internal error.
    """
    stmt = (
        update(Duties)
        .where(Duties.id == id)
        .values(name=name)
        .returning(Duties.id, Duties.name)
    )
    try:
        async with get_async_session() as session:
            result = await session.execute(stmt)
            row = result.one_or_none()
    except Exception as e:
        return _internal_error("update", e, duty_id=id, name=name)

    if row is None:
        logger.error("Duty to update does not exist", duty_id=id)
        return Err(InternalError(f"Duty {id} does not exist"))

    duty = _to_duty(row)
    logger.info("Updated duty", duty_id=duty.id, name=duty.name)
    return Ok(duty)


async def remove_duty(id: str) -> Result[Duty]:
    """Delete a duty and return the row as it was before removal."""
    stmt = delete(Duties).where(Duties.id == id).returning(Duties.id, Duties.name)
    try:
        async with get_async_session() as session:
            result = await session.execute(stmt)
            row = result.one_or_none()
    except Exception as e:
        return _internal_error("remove", e, duty_id=id)

    if row is None:
        logger.error("Duty to delete does not exist", duty_id=id)
        return Err(InternalError(f"Duty {id} does not exist"))

    duty = _to_duty(row)
    logger.info("Deleted duty", duty_id=duty.id, name=duty.name)
    return Ok(duty)
