"""
Duty query and mutation resolvers.

Inputs are validated before the repository is consulted, existence and name
uniqueness are checked through the repository, and only then is the write
issued. Every outcome is a ``Result``; repository errors are passed through
unchanged.
"""

from __future__ import annotations

import asyncio
import uuid

from ... import repository
from ...errors import DuplicateName, InvalidInput, NotFound
from ...logging import get_logger
from ...result import Err, Result
from ..types.duty import Duty

logger = get_logger(__name__)

DUPLICATE_NAME_ON_UPDATE = "Duty's name already exist"


def generate_duty_id() -> str:
    return str(uuid.uuid4())


async def resolve_duties() -> Result[list[Duty]]:
    return await repository.list_duties()


async def create_duty(name: str) -> Result[Duty]:
    """Create a duty with a freshly generated id, rejecting duplicate names."""
    if not name:
        return Err(InvalidInput())

    name_exists = await repository.exists(name=name)
    if name_exists.is_err():
        return name_exists
    if name_exists.value:
        logger.info("Rejected duplicate duty name on create", name=name)
        return Err(DuplicateName())

    return await repository.insert_duty(generate_duty_id(), name)


async def update_duty(id: str, name: str) -> Result[Duty]:
    """
    Rename an existing duty.

    The id and name checks run concurrently. A missing id wins over a taken
    name. The name check does not exclude the duty being renamed, so renaming
    a duty to its current name is rejected as a duplicate.
    """
    if not id or not name:
        return Err(InvalidInput())

    id_exists, name_exists = await asyncio.gather(
        repository.exists(id=id),
        repository.exists(name=name),
    )
    if id_exists.is_err():
        return id_exists
    if name_exists.is_err():
        return name_exists

    if not id_exists.value:
        logger.info("Duty to update not found", duty_id=id)
        return Err(NotFound())
    if name_exists.value:
        logger.info("Rejected duplicate duty name on update", duty_id=id, name=name)
        return Err(DuplicateName(DUPLICATE_NAME_ON_UPDATE))

    return await repository.update_duty(id, name)


async def delete_duty(id: str) -> Result[Duty]:
    if not id:
        return Err(InvalidInput())

    id_exists = await repository.exists(id=id)
    if id_exists.is_err():
        return id_exists
    if not id_exists.value:
        logger.info("Duty to delete not found", duty_id=id)
        return Err(NotFound())

    return await repository.remove_duty(id)
