"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from graphql import validate_schema as gql_validate_schema
from starlette.requests import HTTPConnection
from strawberry.fastapi import GraphQLRouter

from ..events import BroadcastChannel
from ..logging import get_logger
from ..store import EntityStore
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query
from .subscriptions.root import Subscription
from .types.professor import Professor
from .types.student import Student

logger = get_logger(__name__)

# Student and Professor are listed so the Person interface always has its implementations
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    types=[Student, Professor],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core validation and an introspection query so unresolved
    type references fail startup instead of surfacing at request time.

    Raises:
        Exception: If the schema is invalid or has unresolved types
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


def print_schema() -> str:
    """Return the schema in SDL form."""
    return schema.as_str()


# Create the GraphQL router for FastAPI integration
def create_graphql_router(
    store: EntityStore, channel: BroadcastChannel, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to one store and channel."""

    async def get_context(connection: HTTPConnection) -> dict[str, Any]:
        """Get the context for GraphQL resolvers (HTTP requests and websockets)."""
        return build_context(store, channel, connection=connection)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
