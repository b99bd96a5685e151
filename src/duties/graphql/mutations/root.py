"""
Root GraphQL mutation definitions
"""

import strawberry

from ...result import Result
from ..types.duty import Duty


def _unwrap(result: Result[Duty]) -> Duty:
    if result.is_err():
        raise result.error.to_graphql_error()
    return result.value


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createDuty")
    async def create_duty(self, name: str) -> Duty:
        """Create a new duty with a generated id."""
        from ..resolvers.duty import create_duty

        return _unwrap(await create_duty(name))

    @strawberry.mutation(name="updateDuty")
    async def update_duty(self, id: str, name: str) -> Duty:
        """Rename an existing duty."""
        from ..resolvers.duty import update_duty

        return _unwrap(await update_duty(id, name))

    @strawberry.mutation(name="deleteDuty")
    async def delete_duty(self, id: str) -> Duty:
        """Delete a duty, returning it as it was before removal."""
        from ..resolvers.duty import delete_duty

        return _unwrap(await delete_duty(id))
