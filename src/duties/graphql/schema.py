"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.types import ExecutionResult

from ..config import settings
from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def format_error(error: GraphQLError, *, development: bool) -> dict[str, Any]:
    """Format a GraphQL error for the HTTP response.

    Outside development only the message and ``extensions.code`` are kept so
    locations, paths and any other diagnostic detail never reach the client.
    """
    if development:
        return dict(error.formatted)

    formatted: dict[str, Any] = {"message": error.message}
    code = (error.extensions or {}).get("code")
    if code is not None:
        formatted["extensions"] = {"code": code}
    return formatted


class DutiesGraphQLRouter(GraphQLRouter[dict[str, Any], None]):
    """GraphQL router that applies `format_error` to every error in a response."""

    async def process_result(
        self, request: Request, result: ExecutionResult
    ) -> GraphQLHTTPResponse:
        response = await super().process_result(request, result)
        if result.errors:
            development = settings.is_development
            response["errors"] = [
                format_error(error, development=development) for error in result.errors
            ]
        return response


def create_graphql_router() -> DutiesGraphQLRouter:
    """Create a GraphQL router for FastAPI."""
    return DutiesGraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.is_development else None,
    )
