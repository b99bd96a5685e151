"""
Root GraphQL query definitions
"""

import strawberry

from ..types.duty import Duty


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def duties(self) -> list[Duty]:
        """Get all duties."""
        from ..resolvers.duty import resolve_duties

        result = await resolve_duties()
        if result.is_err():
            raise result.error.to_graphql_error()
        return result.value
