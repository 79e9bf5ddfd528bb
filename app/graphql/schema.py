"""
Main GraphQL schema definition using Strawberry
"""

import logging
from typing import Any

import strawberry
from fastapi import Depends
from graphql import get_introspection_query
from strawberry.fastapi import GraphQLRouter

from app.core.config import GRAPHIQL_ENABLED, GRAPHQL_PATH
from app.core.deps import get_store
from app.db.store import Store
from app.graphql.mutations import Mutation
from app.graphql.queries import Query

logger = logging.getLogger(__name__)

# strawberry checks type references while building this
schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Run an introspection query so startup fails on a schema that cannot serve one."""
    result = schema.execute_sync(get_introspection_query())
    if result.errors:
        messages = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed: %s", messages)
        raise RuntimeError(f"GraphQL introspection failed: {messages}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(store: Store = Depends(get_store)) -> dict[str, Any]:
        return {"store": store}

    return GraphQLRouter(
        schema,
        path=GRAPHQL_PATH,
        graphql_ide="graphiql" if GRAPHIQL_ENABLED else None,
        context_getter=get_context,
    )
